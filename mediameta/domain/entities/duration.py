# mediameta/domain/entities/duration.py
from __future__ import annotations

from dataclasses import dataclass

ATTOSECONDS_PER_SECOND = 10**18


@dataclass(frozen=True, order=True)
class ProbeDuration:
    """
    Exact duration as whole seconds plus an attosecond remainder, the way
    ffprobe writes it ("5.000000", "3382.041000"). Keeps the digits ffprobe
    gave us instead of rounding through a float.
    """
    seconds: int = 0
    attoseconds: int = 0

    def formatted(self) -> str:
        """H:MM:SS with the fraction truncated; hours are not wrapped at 24."""
        total = self.seconds * ATTOSECONDS_PER_SECOND + self.attoseconds
        sign = "-" if total < 0 else ""
        whole = abs(total) // ATTOSECONDS_PER_SECOND
        hours, rest = divmod(whole, 3600)
        minutes, secs = divmod(rest, 60)
        return f"{sign}{hours}:{minutes:02d}:{secs:02d}"

    def __str__(self) -> str:
        return self.formatted()
