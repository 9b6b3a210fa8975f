"""HTTP response model and serializer."""

from dataclasses import dataclass, field
from email.utils import formatdate

from config import SERVER_NAME

REASON_PHRASES: dict[int, str] = {
    200: "OK",
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    408: "Request Timeout",
    431: "Request Header Fields Too Large",
    500: "Internal Server Error",
}


@dataclass(slots=True)
class HTTPResponse:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @classmethod
    def status_only(cls, status_code: int) -> "HTTPResponse":
        """Build a response made of the status line and the blank line only."""
        return cls(status_code=status_code)

    @classmethod
    def for_content(cls, content: bytes, content_type: str) -> "HTTPResponse":
        return cls(
            status_code=200,
            headers={
                "Content-Length": str(len(content)),
                "Content-Type": content_type,
                "Date": formatdate(timeval=None, localtime=False, usegmt=True),
                "Server": SERVER_NAME,
            },
            body=content,
        )

    @property
    def reason_phrase(self) -> str:
        return REASON_PHRASES.get(self.status_code, "Unknown")

    @property
    def status_line(self) -> str:
        return f"HTTP/1.1 {self.status_code} {self.reason_phrase}"

    def to_bytes(self) -> bytes:
        """Serialize the response into HTTP/1.1 wire format bytes."""
        header_lines = [self.status_line]
        header_lines.extend(f"{key}: {value}" for key, value in self.headers.items())
        head = "\r\n".join(header_lines).encode("iso-8859-1") + b"\r\n\r\n"
        return head + self.body
