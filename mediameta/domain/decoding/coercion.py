# mediameta/domain/decoding/coercion.py
"""
Tolerant readers for ffprobe JSON fields.

ffprobe serializes most numbers as strings ("bit_rate": "1584803",
"duration": "5.000000") and leaves fields out when it has nothing to say.
Every reader here returns None for a missing or unreadable field instead of
raising; only a container of the wrong JSON type is a structural error.
"""
from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Type, TypeVar

from mediameta.common.localization import FormatContext
from mediameta.common.logging import get_logger
from mediameta.common.strings.splitters import split_components
from mediameta.domain.entities.duration import ProbeDuration
from mediameta.domain.errors import MetadataDecodeError

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)
T = TypeVar("T")

Container = Mapping[str, Any]

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1


def wire_name(key: str | Enum) -> str:
    return key.value if isinstance(key, Enum) else key


def _lookup(container: Container, key: str | Enum) -> Any:
    return container.get(wire_name(key))


def _int_or_zero(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _float_or_zero(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


# ---- scalars ------------------------------------------------------------------
def decode_optional_str(container: Container, key: str | Enum) -> Optional[str]:
    value = _lookup(container, key)
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def decode_optional_int(container: Container, key: str | Enum) -> Optional[int]:
    """
    64-bit signed integer from a JSON number or a plain ASCII decimal string.
    Padding, digit separators and out-of-range values read as absent.
    """
    value = _lookup(container, key)
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        if not _DECIMAL_RE.fullmatch(value):
            logger.debug("Field %r is not an integer: %r", wire_name(key), value)
            return None
        try:
            value = int(value)
        except ValueError:  # longer than sys.get_int_max_str_digits()
            return None
    if not isinstance(value, int):
        return None
    if not INT64_MIN <= value <= INT64_MAX:
        logger.debug("Field %r is out of 64-bit range: %d", wire_name(key), value)
        return None
    return value


def parse_duration(text: str) -> Optional[ProbeDuration]:
    """
    "SECONDS" or "SECONDS.FRACTION" -> ProbeDuration. Anything that is not a
    number at all ("N/A") or has more than two dot-separated parts is None.
    """
    text = text.strip()
    try:
        float(text)
    except ValueError:
        return None
    parts = split_components(text, ".", max_parts=2)
    if parts is None:
        return None
    negative = text.startswith("-")
    seconds = abs(_int_or_zero(parts[0]))
    attoseconds = 0
    if len(parts) == 2:
        digits = parts[1][:18]
        attoseconds = _int_or_zero(digits.ljust(18, "0")) if digits.isdigit() else 0
    if negative:
        return ProbeDuration(seconds=-seconds, attoseconds=-attoseconds)
    return ProbeDuration(seconds=seconds, attoseconds=attoseconds)


def decode_optional_duration(container: Container, key: str | Enum) -> Optional[ProbeDuration]:
    value = _lookup(container, key)
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        value = repr(value)
    if not isinstance(value, str):
        return None
    duration = parse_duration(value)
    if duration is None:
        logger.debug("Field %r is not a duration: %r", wire_name(key), value)
    return duration


def parse_frame_rate(text: str) -> Optional[float]:
    """
    "NUM/DEN" -> NUM / DEN. Each side reads as 0 when unparseable; a zero
    denominator gives None.

        parse_frame_rate("2997/125")  # 23.976
        parse_frame_rate("0/0")       # None
    """
    parts = text.split("/")
    if len(parts) == 1:
        try:
            return float(text)
        except ValueError:
            return None
    numerator = _float_or_zero(parts[0])
    denominator = _float_or_zero(parts[-1])
    if denominator == 0:
        return None
    return numerator / denominator


def decode_optional_frame_rate(container: Container, key: str | Enum) -> Optional[float]:
    value = _lookup(container, key)
    if not isinstance(value, str):
        return None
    return parse_frame_rate(value)


def decode_optional_timestamp(
    container: Container, key: str | Enum, context: FormatContext
) -> Optional[datetime]:
    value = _lookup(container, key)
    if not isinstance(value, str):
        return None
    parsed = context.parse_timestamp(value)
    if parsed is None:
        logger.debug("Field %r does not match %r: %r", wire_name(key), context.date_parse_format, value)
    return parsed


def decode_optional_enum(container: Container, key: str | Enum, enum_cls: Type[E]) -> Optional[E]:
    value = _lookup(container, key)
    if value is None:
        return None
    try:
        return enum_cls(value)
    except (TypeError, ValueError):
        logger.debug("Unknown %s value for %r: %r", enum_cls.__name__, wire_name(key), value)
        return None


# ---- containers ---------------------------------------------------------------
def require_object(value: Any, path: str) -> Container:
    if not isinstance(value, Mapping):
        raise MetadataDecodeError(f"expected a JSON object, got {type(value).__name__}", path=path)
    return value


def decode_optional_object(
    container: Container,
    key: str | Enum,
    decoder: Callable[[Container, str], T],
    path: str,
) -> Optional[T]:
    """Decode a nested object if present; a non-object value is a structural error."""
    value = _lookup(container, key)
    if value is None:
        return None
    child_path = f"{path}.{wire_name(key)}" if path else wire_name(key)
    return decoder(require_object(value, child_path), child_path)
