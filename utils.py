"""Utility helpers shared across server modules."""

import os
from pathlib import Path

CONTENT_TYPES: dict[str, str] = {
    ".html": "text/html",
    ".txt": "text/plain",
    ".jpg": "image/jpeg",
    ".gif": "image/gif",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def get_content_type(file_path: str | Path) -> str:
    """Map the extension of the last path segment to a MIME type.

    A dot-file such as ``.html`` counts as having the extension ``.html``.
    """
    name = os.path.basename(str(file_path))
    dot_index = name.rfind(".")
    extension = name[dot_index:].lower() if dot_index != -1 else ""
    return CONTENT_TYPES.get(extension, DEFAULT_CONTENT_TYPE)


def resolve_target_path(request_target: str, web_root: str | Path) -> Path | None:
    """Append the request target to the web root, or return None if it escapes the root."""
    # Targets arrive as ISO-8859-1 text; recover the raw bytes for the filesystem.
    raw_target = os.fsdecode(request_target.encode("iso-8859-1", errors="replace"))
    if "\x00" in raw_target:
        return None

    root = Path(web_root).resolve()
    candidate = Path(f"{root}{raw_target}").resolve()

    try:
        candidate.relative_to(root)
    except ValueError:
        return None

    return candidate
