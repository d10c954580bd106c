# mediameta/domain/errors.py
from __future__ import annotations

from typing import Optional


class MediaMetaError(Exception):
    """Base class for errors raised by mediameta."""


class MetadataDecodeError(MediaMetaError, ValueError):
    """
    Structural decode failure: a required container is missing or a JSON
    value that must be an object/array is something else. `path` names the
    offending container, e.g. "streams[2]" or "format.tags".
    """

    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)
