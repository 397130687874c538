"""Command-line entry point.

``benotified watch`` polls the moments API and broadcasts on every new
moment; ``benotified hello`` broadcasts a single greeting. Fatal errors are
logged and turned into a non-zero exit status here, and only here.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from typing import Any

from benotified import __version__
from benotified._constants import GREETING_MESSAGE
from benotified.client import BeRealClient
from benotified.config import BeRealConfig
from benotified.exceptions import BeNotifiedError
from benotified.line import LineBroadcaster
from benotified.poller import MomentPoller, broadcast_once

_logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _default_log_level() -> str:
    level = os.environ.get("BENOTIFIED_LOG_LEVEL", "INFO").strip().upper()
    return level if level in _LOG_LEVELS else "INFO"


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="benotified",
        description="Broadcast a LINE message whenever a new BeReal moment starts.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        type=str.upper,
        default=_default_log_level(),
        help="Logging level (default: $BENOTIFIED_LOG_LEVEL or INFO).",
    )
    parser.set_defaults(region=None, interval=None, message=GREETING_MESSAGE)

    subparsers = parser.add_subparsers(dest="command")

    watch = subparsers.add_parser("watch", help="Poll for new moments and broadcast on change (default).")
    watch.add_argument("--region", help="Region key to track (default: $BEREAL_REGION or asia-east).")
    watch.add_argument(
        "--interval",
        type=_positive_float,
        help="Seconds between polls (default: $BEREAL_POLL_INTERVAL or 5).",
    )

    hello = subparsers.add_parser("hello", help="Broadcast one greeting and exit.")
    hello.add_argument("--message", default=GREETING_MESSAGE, help=f"Text to send (default: {GREETING_MESSAGE!r}).")

    return parser


async def run_watch(args: argparse.Namespace) -> None:
    """Initialize the notifier, then poll forever."""
    async with LineBroadcaster.from_env() as line:
        _logger.info("LINE client initialized.")

        overrides: dict[str, Any] = {}
        if args.region:
            overrides["region"] = args.region
        if args.interval is not None:
            overrides["poll_interval"] = args.interval
        config = BeRealConfig.from_env(**overrides)

        async with BeRealClient(config) as client:
            poller = MomentPoller(
                client,
                line,
                region=config.region,
                interval=config.poll_interval,
            )
            await poller.run()


async def run_hello(args: argparse.Namespace) -> None:
    """Initialize the notifier and send one message."""
    async with LineBroadcaster.from_env() as line:
        _logger.info("LINE client initialized.")
        await broadcast_once(line, args.message)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    handler = run_hello if args.command == "hello" else run_watch
    try:
        asyncio.run(handler(args))
    except KeyboardInterrupt:
        _logger.info("Interrupted")
        return 130
    except (BeNotifiedError, ValueError) as exc:
        _logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    return 0
