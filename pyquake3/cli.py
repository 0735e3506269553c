"""
Command line driver: query a server and print its status

Usage:
    pyquake3-status 192.0.2.10
    pyquake3-status q3.example.com 27961 --timeout 2 --json
"""

import sys
import json
import socket
import logging
import argparse
from typing import List, Optional

from .config.query_config import QueryConfig, DEFAULT_PORT
from .config.validation import validate_port
from .client import query_server
from .errors import ConfigValidationError, Quake3Error
from .models.status import StatusResponse
from .protocol.colors import strip_colors
from .utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def port_number(value: str) -> int:
    """argparse type for the port argument; range errors exit with status 2"""
    try:
        return validate_port(int(value))
    except (ValueError, ConfigValidationError) as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyquake3-status",
        description="Query a Quake III server with getstatus"
    )
    parser.add_argument("host", help="Server IP address or hostname")
    parser.add_argument("port", nargs="?", type=port_number, default=DEFAULT_PORT,
                        help=f"Server port (default: {DEFAULT_PORT})")
    parser.add_argument("--timeout", type=float, default=3.0,
                        help="Seconds to wait for the reply (default: 3)")
    parser.add_argument("--json", action="store_true", help="Print the raw status as JSON")
    parser.add_argument("--strip-colors", action="store_true", help="Remove ^N color codes")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def resolve_host(host: str) -> str:
    """Resolve a hostname to an IP literal (IP literals pass through)."""
    try:
        infos = socket.getaddrinfo(host, None, type=socket.SOCK_DGRAM)
    except (socket.gaierror, UnicodeError) as e:
        raise Quake3Error(f"Cannot resolve {host}: {e}") from e
    return infos[0][4][0]


def format_status(status: StatusResponse, clean: bool = False) -> str:
    """Human readable summary of a status reply."""
    text = strip_colors if clean else (lambda value: value)

    limit = status.max_clients if status.max_clients is not None else "?"
    lines = [
        f"Host Name: {text(status.hostname)}",
        f"Map: {status.map_name}",
        f"Game: {status.game_name}",
        f"Players: {status.player_count}/{limit} ({len(status.bots)} bots)",
        f"Password: {'yes' if status.needs_password else 'no'}",
    ]
    for player in status.players:
        lines.append(f"  {player.score:>6} {player.ping:>5}  {text(player.name)}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = QueryConfig(
        port=args.port,
        timeout=args.timeout,
        log_level="DEBUG" if args.debug else "WARNING",
        strip_colors=args.strip_colors
    )
    configure_logging(getattr(logging, config.log_level))

    try:
        config.update(address=resolve_host(args.host))
        status = query_server(config)
    except Quake3Error as e:
        logger.debug("Query failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(status.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_status(status, clean=config.strip_colors))
    return 0


if __name__ == "__main__":
    sys.exit(main())
