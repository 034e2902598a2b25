"""Helpers for serving static files with a custom not-found page."""

from __future__ import annotations

import logging
from http import HTTPStatus

logger = logging.getLogger(__name__)


def clean_request_path(path: str) -> str:
    """Root ``path`` and reduce it to its shortest equivalent form.

    Empty and ``.`` segments are dropped, ``..`` removes the previous segment
    and never climbs above the root.
    """
    parts = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts:
                parts.pop()
            continue
        parts.append(segment)
    return "/" + "/".join(parts)


def file_error_status(error: BaseException) -> HTTPStatus:
    """HTTP status for an error raised while opening a static file.

    Missing files map to 404 (served by the not-found page), permission
    problems to 403 and anything else to 500.
    """
    if isinstance(error, FileNotFoundError):
        return HTTPStatus.NOT_FOUND
    if isinstance(error, PermissionError):
        return HTTPStatus.FORBIDDEN
    logger.error("Error: %s", error)
    return HTTPStatus.INTERNAL_SERVER_ERROR


__all__ = ["clean_request_path", "file_error_status"]