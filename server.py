"""Main web server entry point and connection lifecycle orchestration."""

from __future__ import annotations

import ipaddress
import logging
import socket
import sys
from pathlib import Path

import server_log
from config import (
    ACCEPT_POLL_SECS,
    EXIT_BIND_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_OK,
    HOST,
    LISTEN_BACKLOG,
    LOG_FILE,
    MAX_HEADER_BYTES,
    PORT,
    SOCKET_TIMEOUT_SECS,
    ConfigurationError,
    ServerConfig,
    parse_server_args,
)
from handlers.static_files import serve_file
from request import HTTPRequest, HTTPRequestParseError
from response import HTTPResponse
from server_log import ERROR, INFO, REQUEST, RESPONSE, SERVER_STARTED, SERVER_STOPPED, tagged
from socket_handler import (
    HeaderTooLargeError,
    SocketTimeoutError,
    read_request_head,
    write_http_response,
)

logger = logging.getLogger(__name__)


class BindError(Exception):
    """Raised when the listening socket cannot be bound."""


def _address_family(host: str) -> socket.AddressFamily:
    try:
        if ipaddress.ip_address(host).version == 6:
            return socket.AF_INET6
    except ValueError:
        pass
    return socket.AF_INET


class HTTPServer:
    """Serves one connection at a time: read, respond, close, then accept again."""

    def __init__(
        self,
        web_root: str | Path,
        host: str = HOST,
        port: int = PORT,
        *,
        socket_timeout_secs: float = SOCKET_TIMEOUT_SECS,
        max_header_bytes: int = MAX_HEADER_BYTES,
    ) -> None:
        self.web_root = Path(web_root)
        self.host = host
        self.port = port
        self.socket_timeout_secs = socket_timeout_secs
        self.max_header_bytes = max_header_bytes

        self._running = False

    @classmethod
    def from_config(cls, config: ServerConfig) -> "HTTPServer":
        return cls(web_root=config.web_root, host=config.web_ip, port=config.web_port)

    def start(self) -> None:
        """Bind the listener and serve connections until stop() is called."""
        with self._bind() as server_socket:
            self._running = True
            logger.info(
                "Application started on %s:%s serving %s",
                self.host,
                self.port,
                self.web_root,
                extra=tagged(SERVER_STARTED),
            )
            try:
                while self._running:
                    connection = self._accept(server_socket)
                    if connection is None:
                        break
                    self._handle_client(*connection)
            finally:
                self._running = False
                logger.info("Application stopped", extra=tagged(SERVER_STOPPED))

    def stop(self) -> None:
        """Ask the accept loop to exit; it notices within ACCEPT_POLL_SECS."""
        self._running = False

    def _bind(self) -> socket.socket:
        server_socket = socket.socket(_address_family(self.host), socket.SOCK_STREAM)
        try:
            server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            server_socket.bind((self.host, self.port))
            server_socket.listen(LISTEN_BACKLOG)
        except OSError as exc:
            server_socket.close()
            logger.error(
                "Could not bind %s:%s: %s", self.host, self.port, exc, extra=tagged(ERROR)
            )
            raise BindError(f"Could not bind {self.host}:{self.port}") from exc

        server_socket.settimeout(ACCEPT_POLL_SECS)
        self.port = server_socket.getsockname()[1]
        return server_socket

    def _accept(self, server_socket: socket.socket) -> tuple[socket.socket, tuple] | None:
        logger.info("Waiting for connection...", extra=tagged(INFO))
        while self._running:
            try:
                return server_socket.accept()
            except socket.timeout:
                continue
            except OSError as exc:
                logger.error("Accept failed: %s", exc, extra=tagged(ERROR))
                return None
        return None

    def _handle_client(self, client_socket: socket.socket, address: tuple) -> None:
        with client_socket:
            logger.info("Client connected: %s:%s", address[0], address[1], extra=tagged(INFO))
            client_socket.settimeout(self.socket_timeout_secs)
            try:
                response = self._build_response(client_socket)
                if response is not None:
                    self._send_response(client_socket, response)
            except Exception as exc:
                logger.error("Server encountered an error: %r", exc, extra=tagged(ERROR))
                self._send_status_only(client_socket, 500)

    def _build_response(self, client_socket: socket.socket) -> HTTPResponse | None:
        try:
            raw_request = read_request_head(
                client_socket, max_header_bytes=self.max_header_bytes
            )
        except HeaderTooLargeError as exc:
            logger.error("%s", exc, extra=tagged(ERROR))
            return HTTPResponse.status_only(431)
        except SocketTimeoutError as exc:
            logger.error("%s", exc, extra=tagged(ERROR))
            return HTTPResponse.status_only(408)

        if not raw_request:
            logger.info("Client closed the connection without a request", extra=tagged(INFO))
            return None

        logger.info("%s", raw_request.decode("iso-8859-1").strip(), extra=tagged(REQUEST))

        try:
            request = HTTPRequest.from_bytes(raw_request)
        except HTTPRequestParseError as exc:
            if exc.status_code != 405:
                logger.error("Malformed request: %s", exc, extra=tagged(ERROR))
            return HTTPResponse.status_only(exc.status_code)

        return serve_file(request, self.web_root)

    def _send_response(self, client_socket: socket.socket, response: HTTPResponse) -> None:
        write_http_response(client_socket, response.to_bytes())
        if response.body or response.headers:
            logger.info(
                "%s %s Content-Type: %s Content-Length: %s",
                response.status_code,
                response.reason_phrase,
                response.headers.get("Content-Type", "-"),
                len(response.body),
                extra=tagged(RESPONSE),
            )
            return
        logger.info(
            "%s %s", response.status_code, response.reason_phrase, extra=tagged(RESPONSE)
        )

    def _send_status_only(self, client_socket: socket.socket, status_code: int) -> None:
        try:
            self._send_response(client_socket, HTTPResponse.status_only(status_code))
        except OSError as exc:
            logger.error(
                "Could not send %s response: %s", status_code, exc, extra=tagged(ERROR)
            )


def main(argv: list[str] | None = None, *, log_path: str | Path = LOG_FILE) -> int:
    handler = server_log.configure_logging(log_path)
    try:
        try:
            config = parse_server_args(sys.argv[1:] if argv is None else argv)
        except ConfigurationError as exc:
            logger.error(
                "Missing or invalid arguments (webRoot, webIP, webPort): %s",
                exc,
                extra=tagged(ERROR),
            )
            return EXIT_CONFIG_ERROR

        server = HTTPServer.from_config(config)
        try:
            server.start()
        except BindError:
            return EXIT_BIND_ERROR
        except KeyboardInterrupt:
            server.stop()
        return EXIT_OK
    finally:
        server_log.remove_logging(handler)


if __name__ == "__main__":
    sys.exit(main())
