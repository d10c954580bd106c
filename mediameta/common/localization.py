# mediameta/common/localization.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional
from zoneinfo import ZoneInfo

from mediameta.common.logging import get_logger
from mediameta.common.settings import DisplayConfig, Settings, get_settings

logger = get_logger(__name__)


@dataclass(frozen=True)
class Localizer:
    """
    Label/unit translation table. `translate` never fails: unknown keys
    come back as the supplied default text.
    """
    table: Mapping[str, str] = field(default_factory=dict)

    def translate(self, key: str, default: Optional[str] = None) -> str:
        value = self.table.get(key)
        if value:
            return value
        return default if default is not None else key

    @classmethod
    def from_file(cls, path: Path | str | None) -> "Localizer":
        if path is None:
            return cls()
        p = Path(path)
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.warning("Translation table not found: %s", p)
            return cls()
        except json.JSONDecodeError:
            logger.warning("Translation table is not valid JSON: %s", p)
            return cls()
        if not isinstance(data, dict):
            logger.warning("Translation table must be a JSON object: %s", p)
            return cls()
        return cls(table={str(k): str(v) for k, v in data.items()})


@dataclass(frozen=True)
class FormatContext:
    """
    Read-only formatting configuration shared by decoders and projections:
    number separators, the timestamp wire format, the display timezone and
    the translation table. Build it once (see `get_format_context`) and pass
    it down; nothing here is mutated after construction.
    """
    thousands_sep: str = ","
    decimal_sep: str = "."
    fraction_digits: int = 6
    date_parse_format: str = "%Y-%m-%dT%H:%M:%S.%f%z"
    date_display_format: str = "%b %d, %Y, %H:%M:%S"
    tz: tzinfo = timezone.utc
    localizer: Localizer = field(default_factory=Localizer)

    @classmethod
    def from_settings(cls, settings: Settings) -> "FormatContext":
        display: DisplayConfig = settings.display
        return cls(
            thousands_sep=display.thousands_sep,
            decimal_sep=display.decimal_sep,
            fraction_digits=display.fraction_digits,
            date_parse_format=display.date_parse_format,
            date_display_format=display.date_display_format,
            tz=ZoneInfo(settings.tz),
            localizer=Localizer.from_file(settings.translations_path),
        )

    def translate(self, key: str, default: Optional[str] = None) -> str:
        return self.localizer.translate(key, default)

    # ---- numbers --------------------------------------------------------------
    def _localize(self, text: str) -> str:
        # text uses "," grouping and "." decimals as produced by format()
        return text.replace(",", "\0").replace(".", self.decimal_sep).replace("\0", self.thousands_sep)

    def format_int(self, value: int) -> str:
        return self._localize(f"{value:,d}")

    def format_number(self, value: float, max_fraction_digits: Optional[int] = None) -> str:
        """Grouped number with trailing fraction zeros trimmed: 24.0 -> '24', 23.976 -> '23.976'."""
        digits = self.fraction_digits if max_fraction_digits is None else max_fraction_digits
        text = f"{value:,.{digits}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        if text in ("-0", ""):
            text = "0"
        return self._localize(text)

    # ---- dates ----------------------------------------------------------------
    def parse_timestamp(self, text: str) -> Optional[datetime]:
        try:
            parsed = datetime.strptime(text, self.date_parse_format)
        except (TypeError, ValueError):
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=self.tz)
        return parsed

    def format_timestamp(self, value: datetime) -> str:
        return value.astimezone(self.tz).strftime(self.date_display_format)


@lru_cache(maxsize=1)
def get_format_context() -> FormatContext:
    """Process-wide FormatContext built from settings on first use."""
    return FormatContext.from_settings(get_settings())
