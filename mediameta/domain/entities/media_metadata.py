# mediameta/domain/entities/media_metadata.py
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Optional, Tuple

from mediameta.common.localization import FormatContext, get_format_context
from mediameta.common.logging import get_logger
from mediameta.domain.decoding.coercion import Container, require_object
from mediameta.domain.entities.format import FormatMetadata
from mediameta.domain.entities.stream import StreamMetadata
from mediameta.domain.enums.stream_kind import StreamKind
from mediameta.domain.errors import MetadataDecodeError

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class MediaMetadata:
    """
    Whole ffprobe report: `streams` in report order plus the container `format`.

    Identity is the described file: two reports are equal (and hash alike)
    when `format.file_name` matches, whatever else they contain. Use
    `same_content` for a field-by-field comparison.
    """
    streams: Tuple[StreamMetadata, ...]
    format: FormatMetadata

    @classmethod
    def from_json(cls, obj: Any, context: Optional[FormatContext] = None) -> "MediaMetadata":
        context = context or get_format_context()
        c: Container = require_object(obj, "$")

        if "streams" not in c or c["streams"] is None:
            raise MetadataDecodeError("required key 'streams' is missing", path="streams")
        raw_streams = c["streams"]
        if not isinstance(raw_streams, list):
            raise MetadataDecodeError(
                f"expected a JSON array, got {type(raw_streams).__name__}", path="streams"
            )
        if "format" not in c or c["format"] is None:
            raise MetadataDecodeError("required key 'format' is missing", path="format")

        streams = tuple(
            StreamMetadata.from_json(s, context, path=f"streams[{i}]") for i, s in enumerate(raw_streams)
        )
        fmt = FormatMetadata.from_json(c["format"], context, path="format")
        logger.debug("Decoded %d stream(s) for %r", len(streams), fmt.file_name)
        return cls(streams=streams, format=fmt)

    # ---- identity -------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MediaMetadata):
            return NotImplemented
        return self.format.file_name == other.format.file_name

    def __hash__(self) -> int:
        return hash(self.format.file_name)

    def same_content(self, other: "MediaMetadata") -> bool:
        return all(getattr(self, f.name) == getattr(other, f.name) for f in fields(self))

    # ---- lookups --------------------------------------------------------------
    def streams_of(self, kind: StreamKind) -> Tuple[StreamMetadata, ...]:
        return tuple(s for s in self.streams if s.codec_type == kind)

    def first_stream(self, kind: StreamKind) -> Optional[StreamMetadata]:
        return next((s for s in self.streams if s.codec_type == kind), None)
