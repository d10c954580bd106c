from __future__ import annotations
from enum import StrEnum

_FACTORS = {
    "bit": 1 / 8,
    "byte": 1.0,
    "kilo_byte": 1e3,
    "mega_byte": 1e6,
    "giga_byte": 1e9,
    "tera_byte": 1e12,
}

_DESIGNATIONS = {
    "bit": "bit",
    "byte": "B",
    "kilo_byte": "KB",
    "mega_byte": "MB",
    "giga_byte": "GB",
    "tera_byte": "TB",
}


class SizeUnit(StrEnum):
    """Decimal size units, smallest first."""
    bit = "bit"
    byte = "byte"
    kilo_byte = "kilo_byte"
    mega_byte = "mega_byte"
    giga_byte = "giga_byte"
    tera_byte = "tera_byte"

    @property
    def factor(self) -> float:
        """Bytes per one unit."""
        return _FACTORS[self.value]

    @property
    def designation(self) -> str:
        return _DESIGNATIONS[self.value]
