from __future__ import annotations
from enum import StrEnum

class RoundingRule(StrEnum):
    none = "none"
    round_down = "round_down"
    round_up = "round_up"
