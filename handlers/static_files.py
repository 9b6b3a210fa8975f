"""Static file handler for GET requests beneath the web root."""

import logging
from pathlib import Path

from request import HTTPRequest
from response import HTTPResponse
from server_log import ERROR, tagged
from utils import get_content_type, resolve_target_path

logger = logging.getLogger(__name__)


def serve_file(request: HTTPRequest, web_root: str | Path) -> HTTPResponse:
    file_path = resolve_target_path(request.target, web_root)
    if file_path is None or not file_path.is_file():
        return HTTPResponse.status_only(404)

    try:
        content = file_path.read_bytes()
    except OSError as exc:
        logger.error("Internal Server Error: %s", exc, extra=tagged(ERROR))
        return HTTPResponse.status_only(500)

    # Type follows the requested name, not a symlink target.
    return HTTPResponse.for_content(content, get_content_type(request.target))
