# mediameta/domain/entities/stream.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from mediameta.common.localization import FormatContext, get_format_context
from mediameta.domain.decoding.coercion import (
    Container,
    decode_optional_duration,
    decode_optional_enum,
    decode_optional_frame_rate,
    decode_optional_int,
    decode_optional_object,
    decode_optional_str,
    decode_optional_timestamp,
    require_object,
)
from mediameta.domain.entities.duration import ProbeDuration
from mediameta.domain.enums.rounding_rule import RoundingRule
from mediameta.domain.enums.size_unit import SizeUnit
from mediameta.domain.enums.stream_kind import StreamKind
from mediameta.domain.ports.projection import (
    ProjectableMixin,
    ProjectionKey,
    render_duration,
    render_hertz,
    render_int,
    render_number,
    render_size,
    render_timestamp,
)


class StreamTagsKey(ProjectionKey):
    language = "language", "Language"
    title = "title", "Title"
    duration = "DURATION", "Duration"
    number_of_frames = "NUMBER_OF_FRAMES", "Number of frames"
    number_of_bytes = "NUMBER_OF_BYTES", "Size"
    creation_time = "creation_time", "Creation time"
    handler_name = "handler_name", "Handler name"
    vendor_id = "vendor_id", "Vendor ID"
    encoder = "encoder", "Encoder"
    timecode = "timecode", "Timecode"


@dataclass(frozen=True)
class StreamTags(ProjectableMixin):
    """
    Free-form `tags` of one stream. Matroska writes the statistics tags
    (DURATION, NUMBER_OF_FRAMES, NUMBER_OF_BYTES) in upper case; MP4 writes
    handler_name/vendor_id. `duration` stays the raw "00:47:09.622000000".
    """
    Key = StreamTagsKey

    language: Optional[str] = None
    title: Optional[str] = None
    duration: Optional[str] = None
    number_of_frames: Optional[int] = None
    number_of_bytes: Optional[int] = None
    creation_time: Optional[datetime] = None
    handler_name: Optional[str] = None
    vendor_id: Optional[str] = None
    encoder: Optional[str] = None
    timecode: Optional[str] = None

    @classmethod
    def from_json(
        cls, obj: Container, context: Optional[FormatContext] = None, path: str = "tags"
    ) -> "StreamTags":
        context = context or get_format_context()
        c = require_object(obj, path)
        K = StreamTagsKey
        return cls(
            language=decode_optional_str(c, K.language),
            title=decode_optional_str(c, K.title),
            duration=decode_optional_str(c, K.duration),
            number_of_frames=decode_optional_int(c, K.number_of_frames),
            number_of_bytes=decode_optional_int(c, K.number_of_bytes),
            creation_time=decode_optional_timestamp(c, K.creation_time, context),
            handler_name=decode_optional_str(c, K.handler_name),
            vendor_id=decode_optional_str(c, K.vendor_id),
            encoder=decode_optional_str(c, K.encoder),
            timecode=decode_optional_str(c, K.timecode),
        )

    def _render(self, key: StreamTagsKey, context: FormatContext) -> Optional[str]:
        if key is StreamTagsKey.number_of_frames:
            return render_int(self.number_of_frames, context)
        if key is StreamTagsKey.number_of_bytes:
            return render_size(self.number_of_bytes, SizeUnit.byte, context)
        if key is StreamTagsKey.creation_time:
            return render_timestamp(self.creation_time, context)
        return getattr(self, key.name)


class StreamKey(ProjectionKey):
    stream_index = "index", "Index"
    codec_name = "codec_name", "Codec name"
    codec_long_name = "codec_long_name", "Codec long name"
    profile = "profile", "Profile"
    codec_type = "codec_type", "Codec type"
    codec_tag_string = "codec_tag_string", "Codec tag string"
    width = "width", "Width"
    height = "height", "Height"
    color_range = "color_range", "Color range"
    color_space = "color_space", "Color space"
    display_aspect_ratio = "display_aspect_ratio", "Aspect ratio"
    pixel_format = "pix_fmt", "Pixel format"
    field_order = "field_order", "Field order"
    frame_rate = "r_frame_rate", "Frame rate"
    duration = "duration", "Duration"
    start_time = "start_time", "Start time"
    bit_rate = "bit_rate", "Bit rate"
    bits_per_raw_sample = "bits_per_raw_sample", "Bits per raw sample"
    number_frames = "nb_frames", "Number frames"
    sample_rate = "sample_rate", "Sample rate"
    channels = "channels", "Channels"
    channel_layout = "channel_layout", "Channel layout"
    bits_per_sample = "bits_per_sample", "Bits per sample"
    time_base = "time_base", "Time base"
    tags = "tags", "Tags"


_INT_KEYS = frozenset({StreamKey.width, StreamKey.height, StreamKey.channels})
_BIT_SIZE_KEYS = frozenset({StreamKey.bits_per_raw_sample, StreamKey.bits_per_sample})


@dataclass(frozen=True)
class StreamMetadata(ProjectableMixin):
    """
    One elementary stream from ffprobe `-show_streams`. Every field is
    optional; a field ffprobe left out or wrote as garbage is None.
    """
    Key = StreamKey
    Tags = StreamTags

    index: Optional[int] = None
    codec_name: Optional[str] = None  # h264
    codec_long_name: Optional[str] = None
    profile: Optional[str] = None  # High
    codec_type: Optional[StreamKind] = None
    codec_tag_string: Optional[str] = None  # avc1
    width: Optional[int] = None
    height: Optional[int] = None
    color_range: Optional[str] = None  # tv
    color_space: Optional[str] = None  # bt709
    field_order: Optional[str] = None  # progressive
    display_aspect_ratio: Optional[str] = None  # 16:9
    pixel_format: Optional[str] = None  # yuv420p
    frame_rate: Optional[float] = None  # from "2997/125"
    duration: Optional[ProbeDuration] = None
    start_time: Optional[ProbeDuration] = None
    bit_rate: Optional[int] = None
    bits_per_raw_sample: Optional[int] = None
    number_frames: Optional[str] = None
    sample_rate: Optional[int] = None  # Hz
    channels: Optional[int] = None
    channel_layout: Optional[str] = None  # 5.1(side)
    bits_per_sample: Optional[int] = None
    time_base: Optional[str] = None  # 1/1000
    tags: Optional[StreamTags] = None

    @classmethod
    def from_json(
        cls, obj: Container, context: Optional[FormatContext] = None, path: str = "stream"
    ) -> "StreamMetadata":
        context = context or get_format_context()
        c = require_object(obj, path)
        K = StreamKey
        return cls(
            index=decode_optional_int(c, K.stream_index),
            codec_name=decode_optional_str(c, K.codec_name),
            codec_long_name=decode_optional_str(c, K.codec_long_name),
            profile=decode_optional_str(c, K.profile),
            codec_type=decode_optional_enum(c, K.codec_type, StreamKind),
            codec_tag_string=decode_optional_str(c, K.codec_tag_string),
            width=decode_optional_int(c, K.width),
            height=decode_optional_int(c, K.height),
            color_range=decode_optional_str(c, K.color_range),
            color_space=decode_optional_str(c, K.color_space),
            field_order=decode_optional_str(c, K.field_order),
            display_aspect_ratio=decode_optional_str(c, K.display_aspect_ratio),
            pixel_format=decode_optional_str(c, K.pixel_format),
            frame_rate=decode_optional_frame_rate(c, K.frame_rate),
            duration=decode_optional_duration(c, K.duration),
            start_time=decode_optional_duration(c, K.start_time),
            bit_rate=decode_optional_int(c, K.bit_rate),
            bits_per_raw_sample=decode_optional_int(c, K.bits_per_raw_sample),
            number_frames=decode_optional_str(c, K.number_frames),
            sample_rate=decode_optional_int(c, K.sample_rate),
            channels=decode_optional_int(c, K.channels),
            channel_layout=decode_optional_str(c, K.channel_layout),
            bits_per_sample=decode_optional_int(c, K.bits_per_sample),
            time_base=decode_optional_str(c, K.time_base),
            tags=decode_optional_object(
                c, K.tags, lambda o, p: StreamTags.from_json(o, context, p), path
            ),
        )

    def _render(self, key: StreamKey, context: FormatContext) -> Optional[str]:
        if key is StreamKey.tags:
            return None
        if key is StreamKey.stream_index:
            return render_int(self.index, context)
        if key in _INT_KEYS:
            return render_int(getattr(self, key.name), context)
        if key is StreamKey.codec_type:
            return self.codec_type.describe(context) if self.codec_type else None
        if key is StreamKey.frame_rate:
            return render_number(self.frame_rate, context)
        if key is StreamKey.duration or key is StreamKey.start_time:
            return render_duration(getattr(self, key.name))
        if key is StreamKey.bit_rate:
            return render_size(self.bit_rate, SizeUnit.byte, context, RoundingRule.round_down)
        if key in _BIT_SIZE_KEYS:
            return render_size(getattr(self, key.name), SizeUnit.bit, context, RoundingRule.round_down)
        if key is StreamKey.sample_rate:
            return render_hertz(self.sample_rate, context)
        return getattr(self, key.name)

    @property
    def kind(self) -> Optional[StreamKind]:
        return self.codec_type
