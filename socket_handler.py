"""Low-level socket read/write utilities."""

from __future__ import annotations

import socket

from config import BUFFER_SIZE, MAX_HEADER_BYTES

HEADER_TERMINATOR = b"\r\n\r\n"


class HTTPReadError(Exception):
    """Raised when a client request cannot be safely read from the socket."""


class HeaderTooLargeError(HTTPReadError):
    """Raised when HTTP headers exceed configured maximum size."""


class SocketTimeoutError(HTTPReadError):
    """Raised when a client times out while sending request bytes."""


def read_request_head(
    client_socket: socket.socket,
    *,
    buffer_size: int = BUFFER_SIZE,
    max_header_bytes: int = MAX_HEADER_BYTES,
) -> bytes:
    """Read until the header terminator arrives or the peer closes.

    Returns whatever was received, which is empty when the peer closed
    without sending anything.
    """
    buffer = bytearray()

    while HEADER_TERMINATOR not in buffer:
        if len(buffer) > max_header_bytes:
            raise HeaderTooLargeError("Headers exceeded MAX_HEADER_BYTES")

        try:
            chunk = client_socket.recv(buffer_size)
        except socket.timeout as exc:
            raise SocketTimeoutError("Timed out waiting for request bytes") from exc

        if not chunk:
            break
        buffer.extend(chunk)

    header_end_index = buffer.find(HEADER_TERMINATOR)
    if header_end_index == -1:
        header_section_length = len(buffer)
    else:
        header_section_length = header_end_index + len(HEADER_TERMINATOR)
    if header_section_length > max_header_bytes:
        raise HeaderTooLargeError("Headers exceeded MAX_HEADER_BYTES")
    return bytes(buffer)


def write_http_response(client_socket: socket.socket, payload: bytes) -> None:
    """Write the complete response payload to a client socket."""
    client_socket.sendall(payload)
