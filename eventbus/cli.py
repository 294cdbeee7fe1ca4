from __future__ import annotations

import argparse
import sys
import time

from eventbus.config import Settings
from eventbus.events import Event, EventBus, HandlerError
from eventbus.logging_config import configure_from_settings, get_logger

logger = get_logger(__name__)

TICK_EVENT = "TickEvent"


class Ticker:
    """Prints a line for every tick it receives."""

    def __init__(self) -> None:
        self.ticks = 0

    def call(self, event: Event) -> None:
        self.ticks += 1
        print(f"Tock!, {event.data_as(int)}")


def run_ticker(bus: EventBus, count: int, interval: float) -> Ticker:
    ticker = Ticker()
    bus.subscribe(TICK_EVENT, ticker)

    bus.post(Event(TICK_EVENT, 32))
    for i in range(count):
        bus.post(Event(TICK_EVENT, i))
        if interval:
            time.sleep(interval)

    logger.info("ticker_finished", ticks=ticker.ticks)
    return ticker


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="eventbus-demo", description="Post timed ticks through an event bus")
    p.add_argument("--count", type=int, default=settings.tick_count, help="Number of ticks after the first")
    p.add_argument("--interval", type=float, default=settings.tick_interval, help="Seconds between ticks")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--json-logs", action="store_true", default=settings.json_logs, help="Log as JSON")
    return p


def main(argv: list[str] | None = None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    try:
        settings = Settings(
            log_level="DEBUG" if args.verbose else settings.log_level,
            json_logs=args.json_logs,
            tick_interval=args.interval,
            tick_count=args.count,
        )
    except ValueError as e:
        parser.error(str(e))
    configure_from_settings(settings)

    try:
        run_ticker(EventBus(), settings.tick_count, settings.tick_interval)
    except HandlerError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
