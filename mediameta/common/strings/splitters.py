from typing import List


def csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [str(s).strip() for s in v if s is not None and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def split_components(text: str, sep: str, max_parts: int) -> List[str] | None:
    """
    Split `text` on `sep` and return the parts, or None when there are more
    than `max_parts` of them. Empty parts are kept ("5." -> ["5", ""]).
    """
    parts = text.split(sep)
    if len(parts) > max_parts:
        return None
    return parts
