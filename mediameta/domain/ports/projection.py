# mediameta/domain/ports/projection.py
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Protocol, Type, TypeVar

from mediameta.common.localization import FormatContext, get_format_context
from mediameta.domain.entities.duration import ProbeDuration
from mediameta.domain.entities.size_value import SizeValue
from mediameta.domain.enums.rounding_rule import RoundingRule
from mediameta.domain.enums.size_unit import SizeUnit


class ProjectionKey(Enum):
    """
    Closed, ordered key set of a projectable entity.

    Member value is the ffprobe wire name; the second tuple item is the
    default English label. Declaration order is the display order.

        class FormatKey(ProjectionKey):
            file_name = "filename", "File name"
    """

    def __new__(cls, wire_id: str, label: str = ""):
        member = object.__new__(cls)
        member._value_ = wire_id
        member._label = label or wire_id
        return member

    @property
    def id(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self._label

    @property
    def index(self) -> int:
        return type(self)._member_names_.index(self.name)

    def describe(self, context: Optional[FormatContext] = None) -> str:
        if context is None:
            return self.label
        return context.translate(self.label, self.label)

    @classmethod
    def from_id(cls, wire_id: str):
        return cls(wire_id)


K = TypeVar("K", bound=ProjectionKey)


class Projectable(Protocol[K]):
    """Anything that can list its keys and render one of them."""

    @classmethod
    def keys(cls) -> Type[K]: ...

    def value_for(self, key: K | str, context: Optional[FormatContext] = None) -> Optional[str]: ...

    def as_dictionary(self, context: Optional[FormatContext] = None) -> Dict[K, str]: ...


class ProjectableMixin:
    """
    Shared projection logic. Subclasses set `Key` to their ProjectionKey
    type and implement `_render(key, context)`.
    """
    Key: Type[ProjectionKey]

    @classmethod
    def keys(cls) -> Type[ProjectionKey]:
        return cls.Key

    def _render(self, key, context: FormatContext) -> Optional[str]:
        raise NotImplementedError

    def value_for(self, key, context: Optional[FormatContext] = None) -> Optional[str]:
        """Formatted value of one field, or None when it is absent."""
        if not isinstance(key, self.Key):
            key = self.Key.from_id(key)
        return self._render(key, context or get_format_context())

    def as_dictionary(self, context: Optional[FormatContext] = None) -> Dict[ProjectionKey, str]:
        """
        All present fields in declaration order. Keys whose value is absent
        are left out, so the result may be empty.
        """
        context = context or get_format_context()
        out: Dict[ProjectionKey, str] = {}
        for key in self.Key:
            value = self._render(key, context)
            if value is not None:
                out[key] = value
        return out

    def as_labeled_dictionary(self, context: Optional[FormatContext] = None) -> Dict[str, str]:
        """Same as `as_dictionary` but keyed by the (translated) label."""
        context = context or get_format_context()
        return {key.describe(context): value for key, value in self.as_dictionary(context).items()}


# ---- render helpers -----------------------------------------------------------
def render_int(value: Optional[int], context: FormatContext) -> Optional[str]:
    return None if value is None else context.format_int(value)


def render_number(value: Optional[float], context: FormatContext) -> Optional[str]:
    return None if value is None else context.format_number(value)


def render_duration(value: Optional[ProbeDuration]) -> Optional[str]:
    return None if value is None else value.formatted()


def render_hertz(value: Optional[int], context: FormatContext) -> Optional[str]:
    if value is None:
        return None
    return f"{context.format_int(value)} {context.translate('Hz', 'Hz')}"


def render_size(
    value: Optional[int],
    unit: SizeUnit,
    context: FormatContext,
    rule: RoundingRule | None = None,
) -> Optional[str]:
    if value is None:
        return None
    return SizeValue(float(value), unit).optimal(rule).formatted(context)


def render_timestamp(value: Optional[datetime], context: FormatContext) -> Optional[str]:
    return None if value is None else context.format_timestamp(value)
