"""Circular progress dial with the remaining-time label."""
from __future__ import annotations

import math

import pygame

from ui.constants import CARD_W, DIAL_PAD, DIAL_STROKE, LAVENDER, TEXT_COLOR, TRACK_COLOR


def dial_height() -> int:
    return CARD_W


def draw_dial(
    surface: pygame.Surface,
    card: pygame.Rect,
    font: pygame.font.Font,
    progress: float,
    label: str,
) -> None:
    """Arc sweeps clockwise from 12 o'clock; a full circle is progress 1.0."""
    size = CARD_W - 2 * DIAL_PAD
    rect = pygame.Rect(card.x + DIAL_PAD, card.y + DIAL_PAD, size, size)

    pygame.draw.circle(surface, TRACK_COLOR, rect.center, size // 2, DIAL_STROKE)
    if progress >= 1.0:
        pygame.draw.circle(surface, LAVENDER, rect.center, size // 2, DIAL_STROKE)
    elif progress > 0.0:
        sweep = 2 * math.pi * progress
        top = math.pi / 2
        pygame.draw.arc(surface, LAVENDER, rect, top - sweep, top, DIAL_STROKE)

    text = font.render(label, True, TEXT_COLOR)
    surface.blit(text, text.get_rect(center=rect.center))
