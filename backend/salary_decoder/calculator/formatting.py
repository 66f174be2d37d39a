import math
from typing import Literal

Period = Literal["monthly", "annual"]

CURRENCY_SYMBOL = "₹"


def round_half_up(value: float) -> int | float:
    """Round to the nearest integer, halves away from zero.

    Infinity and NaN have no integer form and are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def _group_indian(digits: str) -> str:
    """Group digits the lakh/crore way: 12345678 -> 1,23,45,678."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(amount: float) -> str:
    """Format an amount as whole rupees with Indian digit grouping."""
    if math.isnan(amount):
        return f"{CURRENCY_SYMBOL}NaN"
    if math.isinf(amount):
        return f"{'-' if amount < 0 else ''}{CURRENCY_SYMBOL}∞"
    rounded = round_half_up(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{_group_indian(str(abs(rounded)))}"


def convert_period(amount: float, from_period: Period) -> float:
    """Convert between monthly and annual figures.

    Monthly to annual is exact. Annual to monthly rounds to the nearest
    rupee, so an annual figure that is not a multiple of 12 will not
    survive a round trip unchanged.
    """
    if from_period == "monthly":
        return amount * 12
    if from_period == "annual":
        return round_half_up(amount / 12)
    raise ValueError(f"Unknown period: {from_period}")
