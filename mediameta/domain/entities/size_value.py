# mediameta/domain/entities/size_value.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from mediameta.common.localization import FormatContext, get_format_context
from mediameta.domain.enums.rounding_rule import RoundingRule
from mediameta.domain.enums.size_unit import SizeUnit

_LADDER: Tuple[SizeUnit, ...] = (
    SizeUnit.bit,
    SizeUnit.byte,
    SizeUnit.kilo_byte,
    SizeUnit.mega_byte,
    SizeUnit.giga_byte,
)

# Upper bound (exclusive, in bytes) for each unit in _LADDER; anything at or
# above the last bound is tera_byte.
_THRESHOLDS: dict[RoundingRule, Sequence[float]] = {
    RoundingRule.none: (1, 1e3, 1e6, 1e9, 1e12),
    RoundingRule.round_down: (10, 1e4, 1e7, 1e10, 1e13),
    RoundingRule.round_up: (0.1, 100, 1e5, 1e8, 1e11),
}


@dataclass(frozen=True)
class SizeValue:
    """
    A magnitude tagged with a decimal size unit.

        SizeValue(1000, SizeUnit.byte).optimal(RoundingRule.round_down)   # 1,000 B
        SizeValue(1000, SizeUnit.byte).optimal(RoundingRule.round_up)     # 1 KB
    """
    magnitude: float
    unit: SizeUnit = SizeUnit.byte

    def size_in(self, unit: SizeUnit) -> float:
        return self.magnitude * self.unit.factor / unit.factor

    def convert(self, unit: SizeUnit) -> "SizeValue":
        return SizeValue(self.size_in(unit), unit)

    def optimal(self, rule: RoundingRule | None = None) -> "SizeValue":
        """
        Pick the most readable unit for this magnitude.

        round_down keeps more digits in a finer unit, round_up switches to
        the coarser unit earlier, and no rule switches at every power of
        1000. Values that fit no step (negative, NaN) come back unchanged.
        """
        bytes_equivalent = self.magnitude * self.unit.factor
        if not bytes_equivalent >= 0:
            return self
        bounds = _THRESHOLDS[rule or RoundingRule.none]
        for unit, upper in zip(_LADDER, bounds):
            if bytes_equivalent < upper:
                return self.convert(unit)
        return self.convert(SizeUnit.tera_byte)

    def formatted(self, context: Optional[FormatContext] = None) -> str:
        context = context or get_format_context()
        rounded = round(self.magnitude * 100) / 100
        designation = context.translate(self.unit.designation, self.unit.designation)
        return f"{context.format_number(rounded, max_fraction_digits=2)} {designation}"

    def __str__(self) -> str:
        return self.formatted()
