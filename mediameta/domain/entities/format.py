# mediameta/domain/entities/format.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from mediameta.common.localization import FormatContext, get_format_context
from mediameta.domain.decoding.coercion import (
    Container,
    decode_optional_duration,
    decode_optional_int,
    decode_optional_object,
    decode_optional_str,
    decode_optional_timestamp,
    require_object,
)
from mediameta.domain.entities.duration import ProbeDuration
from mediameta.domain.enums.rounding_rule import RoundingRule
from mediameta.domain.enums.size_unit import SizeUnit
from mediameta.domain.ports.projection import (
    ProjectableMixin,
    ProjectionKey,
    render_duration,
    render_int,
    render_size,
    render_timestamp,
)


class FormatTagsKey(ProjectionKey):
    title = "title", "Title"
    encoder = "encoder", "Encoder"
    creation_time = "creation_time", "Creation time"


@dataclass(frozen=True)
class FormatTags(ProjectableMixin):
    Key = FormatTagsKey

    title: Optional[str] = None
    encoder: Optional[str] = None
    creation_time: Optional[datetime] = None

    @classmethod
    def from_json(
        cls, obj: Container, context: Optional[FormatContext] = None, path: str = "format.tags"
    ) -> "FormatTags":
        context = context or get_format_context()
        c = require_object(obj, path)
        return cls(
            title=decode_optional_str(c, FormatTagsKey.title),
            encoder=decode_optional_str(c, FormatTagsKey.encoder),
            creation_time=decode_optional_timestamp(c, FormatTagsKey.creation_time, context),
        )

    def _render(self, key: FormatTagsKey, context: FormatContext) -> Optional[str]:
        if key is FormatTagsKey.creation_time:
            return render_timestamp(self.creation_time, context)
        return getattr(self, key.name)


class FormatKey(ProjectionKey):
    file_name = "filename", "File name"
    number_streams = "nb_streams", "Number streams"
    format_name = "format_name", "Format name"
    format_long_name = "format_long_name", "Format long name"
    start_time = "start_time", "Start time"
    duration = "duration", "Duration"
    size = "size", "File size"
    bit_rate = "bit_rate", "Bit rate"
    probe_score = "probe_score", "Probe score"
    tags = "tags", "Tags"


@dataclass(frozen=True)
class FormatMetadata(ProjectableMixin):
    """
    Container-level attributes from ffprobe `-show_format`.

    Display policy for sizes: the file size rounds up to the coarser unit
    early, the bit rate (bits) rounds down so it keeps its digits.
    """
    Key = FormatKey
    Tags = FormatTags

    file_name: Optional[str] = None
    number_streams: Optional[int] = None
    format_name: Optional[str] = None  # mov,mp4,m4a,3gp,3g2,mj2
    format_long_name: Optional[str] = None
    start_time: Optional[ProbeDuration] = None
    duration: Optional[ProbeDuration] = None
    size: Optional[int] = None  # bytes
    bit_rate: Optional[int] = None  # bits per second
    probe_score: Optional[int] = None
    tags: Optional[FormatTags] = None

    @classmethod
    def from_json(
        cls, obj: Container, context: Optional[FormatContext] = None, path: str = "format"
    ) -> "FormatMetadata":
        context = context or get_format_context()
        c = require_object(obj, path)
        K = FormatKey
        return cls(
            file_name=decode_optional_str(c, K.file_name),
            number_streams=decode_optional_int(c, K.number_streams),
            format_name=decode_optional_str(c, K.format_name),
            format_long_name=decode_optional_str(c, K.format_long_name),
            start_time=decode_optional_duration(c, K.start_time),
            duration=decode_optional_duration(c, K.duration),
            size=decode_optional_int(c, K.size),
            bit_rate=decode_optional_int(c, K.bit_rate),
            probe_score=decode_optional_int(c, K.probe_score),
            tags=decode_optional_object(
                c, K.tags, lambda o, p: FormatTags.from_json(o, context, p), path
            ),
        )

    def _render(self, key: FormatKey, context: FormatContext) -> Optional[str]:
        if key is FormatKey.tags:
            return None
        if key is FormatKey.number_streams or key is FormatKey.probe_score:
            return render_int(getattr(self, key.name), context)
        if key is FormatKey.start_time or key is FormatKey.duration:
            return render_duration(getattr(self, key.name))
        if key is FormatKey.size:
            return render_size(self.size, SizeUnit.byte, context, RoundingRule.round_up)
        if key is FormatKey.bit_rate:
            return render_size(self.bit_rate, SizeUnit.bit, context, RoundingRule.round_down)
        return getattr(self, key.name)
