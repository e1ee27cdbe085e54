"""Command-line interface for netutil."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from ._internal.config import get_settings
from ._internal.logging import configure_logging
from .errors import NetUtilError
from .listener import listen_on_local_random_port
from .loopback import localhost
from .reachability import await_reachable
from .urls import host_port

logger = logging.getLogger(__name__)


def _emit(args: argparse.Namespace, text: str, **details: object) -> None:
    """Print plain text, or the details as JSON in verbose mode."""
    if args.verbose:
        print(json.dumps(details, indent=2))
    else:
        print(text)


def cmd_wait(args: argparse.Namespace) -> int:
    """Handle the wait command."""
    timeout = args.timeout if args.timeout is not None else get_settings().wait_timeout
    await_reachable(args.address, timeout)
    _emit(args, "[OK]", address=args.address, reachable=True)
    return 0


def cmd_hostport(args: argparse.Namespace) -> int:
    """Handle the hostport command."""
    results = {url: host_port(url) for url in args.urls}
    _emit(args, "\n".join(results.values()), results=results)
    return 0


def cmd_localhost(args: argparse.Namespace) -> int:
    """Handle the localhost command."""
    ip = localhost()
    _emit(args, str(ip), ip=str(ip), version=ip.version)
    return 0


def cmd_listen(args: argparse.Namespace) -> int:
    """Handle the listen command."""
    with listen_on_local_random_port() as sock:
        host, port = sock.getsockname()[:2]
    target = f"[{host}]:{port}" if ":" in host else f"{host}:{port}"
    _emit(args, target, host=host, port=port)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="netutil",
        description="Small network utilities: wait for ports, normalize URLs, find loopback addresses",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print results as JSON",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    wait_parser = subparsers.add_parser(
        "wait",
        help="Wait until a host:port accepts TCP connections",
    )
    wait_parser.add_argument("address", help="Dial target in host:port form")
    wait_parser.add_argument(
        "-t",
        "--timeout",
        type=float,
        default=None,
        help="Seconds to keep trying (default: NETUTIL_WAIT_TIMEOUT or 30)",
    )
    wait_parser.set_defaults(func=cmd_wait)

    hostport_parser = subparsers.add_parser(
        "hostport",
        help="Print the host:port dial target of URLs",
    )
    hostport_parser.add_argument("urls", nargs="+", metavar="URL", help="URL to normalize")
    hostport_parser.set_defaults(func=cmd_hostport)

    localhost_parser = subparsers.add_parser(
        "localhost",
        help="Print a usable loopback IP address",
    )
    localhost_parser.set_defaults(func=cmd_localhost)

    listen_parser = subparsers.add_parser(
        "listen",
        help="Open a listener on a random loopback port and print its address",
    )
    listen_parser.set_defaults(func=cmd_listen)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    try:
        configure_logging()
    except RuntimeError as e:
        # Invalid NETUTIL_* settings
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        logger.debug("Executing command: %s", args.command)
        return args.func(args)
    except NetUtilError as e:
        logger.error("Error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nInterrupted", file=sys.stderr)
        return 130
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1
