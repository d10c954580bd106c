from __future__ import annotations
from enum import StrEnum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from mediameta.common.localization import FormatContext


class StreamKind(StrEnum):
    """ffprobe `codec_type` of a stream."""
    video = "video"
    audio = "audio"
    data = "data"
    subtitle = "subtitle"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def describe(self, context: Optional["FormatContext"] = None) -> str:
        if context is None:
            return self.label
        return context.translate(self.label, self.label)
