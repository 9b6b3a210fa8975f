"""Unit tests for HTTP response serialization."""

from response import HTTPResponse


def test_status_only_response_has_no_headers_or_body() -> None:
    assert HTTPResponse.status_only(404).to_bytes() == b"HTTP/1.1 404 Not Found\r\n\r\n"
    assert HTTPResponse.status_only(405).to_bytes() == b"HTTP/1.1 405 Method Not Allowed\r\n\r\n"
    assert (
        HTTPResponse.status_only(500).to_bytes()
        == b"HTTP/1.1 500 Internal Server Error\r\n\r\n"
    )


def test_content_response_writes_headers_in_fixed_order() -> None:
    response = HTTPResponse.for_content(b"hello world", "text/html")

    raw = response.to_bytes()
    head, body = raw.split(b"\r\n\r\n", 1)
    lines = head.decode("iso-8859-1").split("\r\n")

    assert lines[0] == "HTTP/1.1 200 OK"
    assert [line.split(":", 1)[0] for line in lines[1:]] == [
        "Content-Length",
        "Content-Type",
        "Date",
        "Server",
    ]
    assert "Content-Length: 11" in lines
    assert "Content-Type: text/html" in lines
    assert "Server: myOwnWebServer" in lines
    assert lines[3].endswith(" GMT")
    assert body == b"hello world"


def test_binary_body_is_written_unchanged() -> None:
    content = bytes(range(256))

    raw = HTTPResponse.for_content(content, "image/gif").to_bytes()

    assert raw.endswith(b"\r\n\r\n" + content)
    assert b"Content-Length: 256\r\n" in raw
