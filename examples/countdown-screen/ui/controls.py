"""Background gradient, card, seconds field and play/stop button."""
from __future__ import annotations

import pygame

from ui.constants import (
    BUTTON_MARGIN_Y,
    BUTTON_SIZE,
    CARD_BG,
    CARD_RADIUS,
    CARD_SHADOW,
    CARD_W,
    FIELD_BORDER,
    FIELD_BORDER_FOCUS,
    FIELD_H,
    FIELD_TOP,
    FIELD_W,
    ICON_COLOR,
    LAVENDER,
    OCEAN,
    PAD,
    SCREEN_H,
    SCREEN_W,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_background(surface: pygame.Surface) -> None:
    """Horizontal ocean-to-lavender gradient."""
    for x in range(SCREEN_W):
        t = x / (SCREEN_W - 1)
        color = tuple(int(a + (b - a) * t) for a, b in zip(OCEAN, LAVENDER))
        pygame.draw.line(surface, color, (x, 0), (x, SCREEN_H))


def card_rect(content_h: int) -> pygame.Rect:
    """Card centered vertically, sized to its content plus the button row."""
    h = content_h + BUTTON_SIZE + 2 * BUTTON_MARGIN_Y
    return pygame.Rect(PAD, (SCREEN_H - h) // 2, CARD_W, h)


def draw_card(surface: pygame.Surface, rect: pygame.Rect) -> None:
    shadow = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
    pygame.draw.rect(shadow, CARD_SHADOW, shadow.get_rect(), border_radius=CARD_RADIUS)
    surface.blit(shadow, (rect.x, rect.y + 4))
    pygame.draw.rect(surface, CARD_BG, rect, border_radius=CARD_RADIUS)


def field_height() -> int:
    return FIELD_TOP + FIELD_H


def draw_seconds_field(
    surface: pygame.Surface,
    card: pygame.Rect,
    font: pygame.font.Font,
    label_font: pygame.font.Font,
    text: str,
    caret_on: bool,
) -> None:
    """Outlined numeric field with a floating ``Seconds`` label."""
    rect = pygame.Rect(0, card.y + FIELD_TOP, FIELD_W, FIELD_H)
    rect.centerx = card.centerx
    border = FIELD_BORDER_FOCUS if text else FIELD_BORDER
    pygame.draw.rect(surface, border, rect, width=2, border_radius=4)

    label = label_font.render("Seconds", True, TEXT_DIM)
    label_pos = (rect.x + 12, rect.y - label.get_height() // 2)
    gap = (label_pos[0] - 4, label_pos[1], label.get_width() + 8, label.get_height())
    pygame.draw.rect(surface, CARD_BG, gap)
    surface.blit(label, label_pos)

    value = font.render(text or "0", True, TEXT_COLOR if text else TEXT_DIM)
    vy = rect.centery - value.get_height() // 2
    surface.blit(value, (rect.x + 16, vy))
    if caret_on:
        cx = rect.x + 16 + (value.get_width() if text else 0) + 2
        pygame.draw.line(surface, TEXT_COLOR, (cx, vy + 4), (cx, vy + value.get_height() - 4), 2)


def button_rect(card: pygame.Rect) -> pygame.Rect:
    rect = pygame.Rect(0, 0, BUTTON_SIZE, BUTTON_SIZE)
    rect.centerx = card.centerx
    rect.bottom = card.bottom - BUTTON_MARGIN_Y
    return rect


def draw_button(surface: pygame.Surface, rect: pygame.Rect, running: bool) -> None:
    """Round button: stop square while running, play triangle otherwise."""
    pygame.draw.circle(surface, LAVENDER, rect.center, rect.w // 2)
    cx, cy = rect.center
    s = rect.w // 5
    if running:
        pygame.draw.rect(surface, ICON_COLOR, (cx - s, cy - s, 2 * s, 2 * s))
    else:
        points = [(cx - s + 3, cy - s - 2), (cx - s + 3, cy + s + 2), (cx + s + 3, cy)]
        pygame.draw.polygon(surface, ICON_COLOR, points)
