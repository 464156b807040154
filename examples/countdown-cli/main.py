"""Countdown CLI — headless countdown paced against wall time.

Prints one line per published snapshot until the countdown completes.

Run:
    python main.py 10
    python main.py 90 --hold-ms 1200 --log-level DEBUG
"""
from __future__ import annotations

import argparse
import logging

from countdown import CountdownConfig, CountdownController, CountdownState, parse_seconds
from countdown.logging_config import setup_logging
from countdown_clock import Scheduler

logger = logging.getLogger("countdown.cli")

BAR_W = 30


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Countdown CLI — terminal countdown timer")
    p.add_argument("seconds", help="Duration in seconds")
    p.add_argument("--tick-ms", type=int, default=1000, help="Tick period (default: 1000)")
    p.add_argument("--hold-ms", type=int, default=0,
                   help="How long the finished state is held (default: 0)")
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return p.parse_args()


def render(state: CountdownState) -> str:
    filled = round(state.progress_fraction * BAR_W)
    bar = "#" * filled + "." * (BAR_W - filled)
    label = state.display_label or "-"
    return f"[{bar}] {label:>9}  {state.phase.value}"


def main() -> None:
    args = parse_args()
    setup_logging(args.log_level)

    config = CountdownConfig(tick_period_ms=args.tick_ms, finish_hold_ms=max(0, args.hold_ms))
    scheduler = Scheduler()
    controller = CountdownController(scheduler, config)
    controller.subscribe(lambda s: print(render(s)), replay=False)

    controller.set_duration(parse_seconds(args.seconds))
    controller.start_timer()
    try:
        scheduler.run_forever(until_idle=True)
    except KeyboardInterrupt:
        logger.warning("interrupted")
        controller.stop_timer()


if __name__ == "__main__":
    main()
