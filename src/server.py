"""Protean Engine runner for the donations domain.

With the production overlay (``event_processing = "async"``) domain events
are published to Redis Streams and the Engine delivers them to the
notification event handlers in the background.

Usage:
    PROTEAN_ENV=production python src/server.py
    python src/server.py --test-mode   # Drain pending messages and exit
"""

import argparse
import asyncio

from protean.server.engine import Engine


def _get_domain():
    from donations.domain import donations

    donations.init()
    return donations


async def run(test_mode: bool = False):
    engine = Engine(_get_domain(), test_mode=test_mode)
    await engine.run()


def main():
    parser = argparse.ArgumentParser(description="FoodShare Engine runner")
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Process pending messages once and exit",
    )
    args = parser.parse_args()

    asyncio.run(run(test_mode=args.test_mode))


if __name__ == "__main__":
    main()
