"""Unit tests for extension based content type resolution."""

from pathlib import Path

import pytest

from utils import get_content_type


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("index.html", "text/html"),
        ("notes.txt", "text/plain"),
        ("photo.jpg", "image/jpeg"),
        ("anim.gif", "image/gif"),
        ("INDEX.HTML", "text/html"),
        ("Photo.JpG", "image/jpeg"),
        ("style.css", "application/octet-stream"),
        ("photo.jpeg", "application/octet-stream"),
        ("README", "application/octet-stream"),
        (".html", "text/html"),
        ("/www/.GIF", "image/gif"),
        ("trailing.", "application/octet-stream"),
    ],
)
def test_content_type_table(name: str, expected: str) -> None:
    assert get_content_type(name) == expected


def test_content_type_uses_final_extension_of_path() -> None:
    assert get_content_type(Path("/srv/www/archive.html.gif")) == "image/gif"
    assert get_content_type(Path("/srv/www.html/data")) == "application/octet-stream"
