from mediameta.domain.enums.stream_kind import StreamKind
from mediameta.domain.enums.size_unit import SizeUnit
from mediameta.domain.enums.rounding_rule import RoundingRule
__all__ = [
    "StreamKind",
    "SizeUnit",
    "RoundingRule",
]
