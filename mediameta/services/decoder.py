# mediameta/services/decoder.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional

from mediameta.common.localization import FormatContext, get_format_context
from mediameta.common.logging import get_logger
from mediameta.domain.entities.media_metadata import MediaMetadata
from mediameta.domain.errors import MetadataDecodeError
from mediameta.domain.ports.text_converter import RawTextConverter

logger = get_logger(__name__)


def decode_media_metadata(
    data: bytes | str | Mapping[str, Any],
    context: Optional[FormatContext] = None,
) -> MediaMetadata:
    """
    Decode an ffprobe `-show_streams -show_format -print_format json` document.

    `data` may be raw bytes/str or an already parsed mapping. Missing or
    unreadable leaf fields become None; a document without `streams`/`format`
    (or with the wrong JSON types for them) raises MetadataDecodeError.
    """
    context = context or get_format_context()
    if isinstance(data, (bytes, bytearray, str)):
        try:
            doc = json.loads(data)
        except json.JSONDecodeError as e:
            logger.warning("Metadata is not valid JSON: %s", e)
            raise MetadataDecodeError(f"invalid JSON: {e.msg}", path="$") from e
    else:
        doc = data

    try:
        return MediaMetadata.from_json(doc, context)
    except MetadataDecodeError as e:
        logger.warning("Failed to decode media metadata: %s", e)
        raise


def decode_media_information(
    text: str,
    converter: RawTextConverter,
    context: Optional[FormatContext] = None,
) -> MediaMetadata:
    """Text report -> JSON (via the external converter) -> MediaMetadata."""
    data = converter(text)
    if data is None:
        raise MetadataDecodeError("converter produced no JSON", path="$")
    return decode_media_metadata(data, context)


def load_media_metadata(path: str | Path, context: Optional[FormatContext] = None) -> MediaMetadata:
    """Decode a saved ffprobe JSON report from disk."""
    p = Path(path)
    logger.debug("Loading media metadata from %s", p)
    return decode_media_metadata(p.read_bytes(), context)
