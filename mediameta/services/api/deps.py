# mediameta/services/api/deps.py
from __future__ import annotations

from mediameta.common.localization import FormatContext, get_format_context


def get_context() -> FormatContext:
    """
    Provide the process-wide FormatContext via DI.
    Tests override this to pin separators/timezone.
    """
    return get_format_context()
