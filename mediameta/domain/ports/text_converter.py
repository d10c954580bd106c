from __future__ import annotations
from typing import Optional, Protocol


class RawTextConverter(Protocol):
    """
    Turns a probing tool's plain-text media report into ffprobe-style JSON.
    Implemented outside this package; None means the text was not understood.
    """
    def __call__(self, text: str) -> Optional[bytes]: ...
