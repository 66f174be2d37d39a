from datetime import datetime
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from typing import Annotated, List, Literal, Optional

from ..domain.salary import PayslipInput, PayslipResult

# one lakh crore rupees; keeps every derived sum finite
MAX_AMOUNT = 1e12


def _reject_bool(value):
    if isinstance(value, bool):
        raise ValueError("amount must be a number")
    return value


Amount = Annotated[float, BeforeValidator(_reject_bool), Field(ge=0, le=MAX_AMOUNT, allow_inf_nan=False)]


class PayslipForm(BaseModel):
    """Raw form values as entered, possibly annual."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    month: str = Field(min_length=1)
    period: Literal["monthly", "annual"] = "monthly"
    basic: Amount = 0
    hra: Amount = 0
    special_allowance: Amount = 0
    other_allowance: Amount = 0
    employee_pf: Amount = 0
    employer_pf: Amount = 0
    professional_tax: Amount = 0
    income_tax: Amount = 0


class CalculationRead(BaseModel):
    input: PayslipInput
    result: PayslipResult


class ConvertRequest(BaseModel):
    amount: float
    from_period: Literal["monthly", "annual"]


class ConvertRead(ConvertRequest):
    converted: float


class SavedPayslipRead(BaseModel):
    id: int
    month: str
    basic: float
    gross_salary: float
    in_hand_salary: float
    ctc: float
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }


class ExplanationRead(BaseModel):
    text: Optional[str] = None
    error: Optional[str] = None


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    messages: List[ChatMessage] = Field(min_length=1)

    @model_validator(mode="after")
    def last_message_from_user(self):
        if self.messages[-1].role != "user":
            raise ValueError("last message must come from the user")
        return self


class ChatRead(BaseModel):
    content: str
    error: Optional[str] = None
