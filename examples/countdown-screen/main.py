"""Countdown Screen — pygame rendering of the countdown timer.

Type a duration in seconds, start it, and watch the dial drain once per
second. The screen only observes the controller's snapshot stream and
sends it three commands.

Controls:
  0-9         Edit seconds (while idle)
  Backspace   Delete last digit
  Enter       Start
  Space       Start / Stop
  Click       Play / Stop button
  Esc         Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from countdown import CountdownConfig, CountdownController, CountdownState, DurationInput
from countdown.logging_config import setup_logging
from countdown_clock import Scheduler
from ui.constants import FINISH_HOLD_MS, FPS, SCREEN_H, SCREEN_W
from ui.controls import (
    button_rect,
    card_rect,
    draw_background,
    draw_button,
    draw_card,
    draw_seconds_field,
    field_height,
)
from ui.dial import dial_height, draw_dial

logger = logging.getLogger("countdown.screen")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Countdown Screen — pygame countdown timer")
    p.add_argument("--seconds", type=int, default=0, help="Prefilled duration (default: 0)")
    p.add_argument("--hold-ms", type=int, default=FINISH_HOLD_MS,
                   help=f"How long 'Finished!' stays up (default: {FINISH_HOLD_MS})")
    p.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    args = p.parse_args()
    args.seconds = max(0, args.seconds)
    args.hold_ms = max(0, args.hold_ms)
    return args


class ScreenState:
    """Holds the scheduler, the controller and the last rendered snapshot."""

    def __init__(self, seconds: int, hold_ms: int) -> None:
        self.scheduler = Scheduler()
        self.controller = CountdownController(
            self.scheduler, CountdownConfig(finish_hold_ms=hold_ms)
        )
        self.field = DurationInput(str(seconds) if seconds else "")
        self.snapshot: CountdownState = self.controller.state
        self.controller.subscribe(self._on_state)
        self.controller.set_duration(self.field.value)

    def _on_state(self, state: CountdownState) -> None:
        self.snapshot = state
        if state == CountdownState.cleared():
            self.field.clear()

    def type_char(self, ch: str) -> None:
        if self.snapshot.is_running:
            return
        if self.field.type_char(ch):
            self.controller.set_duration(self.field.value)

    def backspace(self) -> None:
        if self.snapshot.is_running:
            return
        self.field.backspace()
        self.controller.set_duration(self.field.value)


def main() -> None:
    args = parse_args()
    setup_logging(args.log_level)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Countdown")
    clock = pygame.time.Clock()
    label_font = pygame.font.SysFont("sans", 16)
    field_font = pygame.font.SysFont("sans", 24)
    dial_font = pygame.font.SysFont("sans", 38)

    state = ScreenState(args.seconds, args.hold_ms)
    logger.info("screen ready (%dx%d @ %d fps)", SCREEN_W, SCREEN_H, FPS)

    caret_ms = 0
    running = True

    while running:
        dt_ms = clock.tick(FPS)
        caret_ms = (caret_ms + dt_ms) % 1000
        snapshot = state.snapshot
        content_h = dial_height() if snapshot.is_running else field_height()
        card = card_rect(content_h)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    state.controller.start_timer()
                elif event.key == pygame.K_SPACE:
                    state.controller.toggle()
                elif event.key == pygame.K_BACKSPACE:
                    state.backspace()
                elif event.unicode:
                    state.type_char(event.unicode)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if button_rect(card).collidepoint(event.pos):
                    state.controller.toggle()

        # --- Tick ---
        state.scheduler.advance(dt_ms)

        # --- Render ---
        snapshot = state.snapshot
        content_h = dial_height() if snapshot.is_running else field_height()
        card = card_rect(content_h)

        draw_background(screen)
        draw_card(screen, card)
        if snapshot.is_running:
            draw_dial(screen, card, dial_font, snapshot.progress_fraction, snapshot.display_label)
        else:
            draw_seconds_field(
                screen, card, field_font, label_font, state.field.text, caret_ms < 500
            )
        draw_button(screen, button_rect(card), snapshot.is_running)

        pygame.display.flip()

    state.controller.stop_timer()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
