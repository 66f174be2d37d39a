from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal

AMOUNT_FIELDS = (
    "basic",
    "hra",
    "special_allowance",
    "other_allowance",
    "employee_pf",
    "employer_pf",
    "professional_tax",
    "income_tax",
)


class PayslipInput(BaseModel):
    """Monthly figures for one pay period."""

    model_config = ConfigDict(frozen=True)

    month: str = ""
    # --- earnings ---
    basic: float = 0
    hra: float = 0
    special_allowance: float = 0
    other_allowance: float = 0
    # --- deductions / contributions ---
    employee_pf: float = 0
    employer_pf: float = 0
    professional_tax: float = 0
    income_tax: float = 0


class BreakdownRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    amount: float
    kind: Literal["earning", "deduction", "employer"]
    percentage: float


class PayslipResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    gross_salary: float
    total_deductions: float
    in_hand_salary: float
    ctc: float
    warnings: List[str] = Field(default_factory=list)
    breakdown: List[BreakdownRow] = Field(default_factory=list)
