"""Configuration constants and command-line settings for the web server."""

from __future__ import annotations

import argparse
import ipaddress
from dataclasses import dataclass
from pathlib import Path

HOST: str = "127.0.0.1"
PORT: int = 8080
BUFFER_SIZE: int = 1024
SOCKET_TIMEOUT_SECS: int = 5
ACCEPT_POLL_SECS: float = 0.2
MAX_HEADER_BYTES: int = 16_384
LISTEN_BACKLOG: int = 16
SERVER_NAME: str = "myOwnWebServer"

LOG_FILE: str = "myOwnWebServer.log"
LOG_FORMAT: str = "%(asctime)s [%(tag)s] - %(message)s"
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

EXIT_OK: int = 0
EXIT_CONFIG_ERROR: int = 1
EXIT_BIND_ERROR: int = 2


class ConfigurationError(ValueError):
    """Raised when the command line does not describe a usable server."""


@dataclass(frozen=True, slots=True)
class ServerConfig:
    web_root: Path
    web_ip: str
    web_port: int


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise ConfigurationError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="myownwebserver",
        description="Serve static files from a web root",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-webRoot", dest="web_root", required=True)
    parser.add_argument("-webIP", dest="web_ip", required=True)
    parser.add_argument("-webPort", dest="web_port", type=int, required=True)
    return parser


def parse_server_args(argv: list[str]) -> ServerConfig:
    """Build a ServerConfig from ``-webRoot``, ``-webIP`` and ``-webPort`` flags."""
    args = _build_parser().parse_args(argv)

    if not args.web_root:
        raise ConfigurationError("webRoot cannot be empty")
    web_root = Path(args.web_root)
    if not web_root.is_dir():
        raise ConfigurationError(f"webRoot is not a directory: {args.web_root}")

    try:
        ipaddress.ip_address(args.web_ip)
    except ValueError as exc:
        raise ConfigurationError(f"webIP is not an IP address: {args.web_ip!r}") from exc

    if not 0 < args.web_port < 65536:
        raise ConfigurationError(f"webPort out of range: {args.web_port}")

    return ServerConfig(
        web_root=web_root,
        web_ip=args.web_ip,
        web_port=args.web_port,
    )
