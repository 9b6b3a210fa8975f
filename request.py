"""HTTP request model and request-line parser."""

from dataclasses import dataclass

SUPPORTED_METHOD = "GET"


class HTTPRequestParseError(ValueError):
    """Request parse error carrying an HTTP status code."""

    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True)
class HTTPRequest:
    method: str
    target: str
    raw: str = ""

    @classmethod
    def from_bytes(cls, raw: bytes) -> "HTTPRequest":
        """Parse the request line of raw header bytes.

        Only ``GET`` is served; any other method token is answered with 405.
        The target is the second space-separated field of the first line and
        is kept verbatim, query string included.
        """
        text = raw.decode("iso-8859-1")
        request_line = text.split("\r\n", 1)[0].split("\n", 1)[0]
        parts = request_line.split(" ")

        method = parts[0]
        if method != SUPPORTED_METHOD:
            raise HTTPRequestParseError(
                f"Unsupported method {method[:32]!r}",
                status_code=405,
            )

        if len(parts) < 2 or not parts[1]:
            raise HTTPRequestParseError("Request line has no target")

        return cls(method=method, target=parts[1], raw=text)
