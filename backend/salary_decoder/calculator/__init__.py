from .formatting import convert_period, format_inr, round_half_up
from .rules import DEFAULT_RULES, SalaryRules
from .salary import compute

__all__ = [
    "DEFAULT_RULES",
    "SalaryRules",
    "compute",
    "convert_period",
    "format_inr",
    "round_half_up",
]
