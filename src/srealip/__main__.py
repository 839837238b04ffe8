"""Resolve a client IP from header values on the command line.

Example::

    python -m srealip --forwarded-for "203.0.113.7, 10.0.0.2" \\
        --remote-addr 10.0.0.1:443 --split
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from srealip.configs.config import get_app_config
from srealip.configs.system import LoggingConfig
from srealip.infra.logging import setup_logging
from srealip.selector import naive_real_ip, secure_real_ip

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="srealip",
        description="Pick the real client IP from proxy headers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--forwarded-for",
        action="append",
        default=[],
        metavar="VALUE",
        help="X-Forwarded-For value (repeatable, in receipt order)",
    )
    parser.add_argument(
        "--real-ip",
        type=str,
        default="",
        help="X-Real-IP value (naive mode only)",
    )
    parser.add_argument(
        "--remote-addr",
        type=str,
        default="",
        help="Transport peer address, host or host:port",
    )
    parser.add_argument(
        "--mode",
        choices=("secure", "naive"),
        default=None,
        help="Selection strategy (default: proxy.mode from config)",
    )
    parser.add_argument(
        "--split",
        action="store_true",
        help="Split comma-joined --forwarded-for values into hops",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    config = get_app_config()

    level = "DEBUG" if args.debug else "WARNING"
    setup_logging(LoggingConfig(level=level, json_output=False))

    forwarded_for: list[str] = []
    for value in args.forwarded_for:
        forwarded_for.extend(value.split(",") if args.split else [value])

    mode = args.mode or config.proxy.mode
    if mode == "naive":
        ip = naive_real_ip(args.real_ip, forwarded_for, args.remote_addr)
    else:
        ip = secure_real_ip(forwarded_for, args.remote_addr)
    logger.debug("mode=%s forwarded_for=%r -> %r", mode, forwarded_for, ip)

    print(ip)
    return 0


def cli_entry() -> None:
    """CLI entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
