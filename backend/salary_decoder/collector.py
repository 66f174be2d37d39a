"""Form collection: validate raw payslip input and normalise it to monthly."""

import logging
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from .calculator.formatting import convert_period
from .domain.salary import AMOUNT_FIELDS, PayslipInput
from .schemas.payslip import PayslipForm

logger = logging.getLogger(__name__)

MONTH_MESSAGE = "Select a month"
NUMBER_MESSAGE = "Enter a valid number"
NEGATIVE_MESSAGE = "Must be 0 or more"
PERIOD_MESSAGE = "Choose monthly or annual"
TOO_LARGE_MESSAGE = "Amount is too large"
UNKNOWN_MESSAGE = "Unknown field"


class FormValidationError(ValueError):
    """Raised with one message per invalid field."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors


def _message_for(field: str, error_type: str) -> str:
    if error_type == "extra_forbidden":
        return UNKNOWN_MESSAGE
    if field == "month":
        return MONTH_MESSAGE
    if field == "period":
        return PERIOD_MESSAGE
    if error_type == "greater_than_equal":
        return NEGATIVE_MESSAGE
    if error_type == "less_than_equal":
        return TOO_LARGE_MESSAGE
    return NUMBER_MESSAGE


def collect(raw: Mapping[str, Any]) -> PayslipInput:
    """Validate ``raw`` form values and return monthly ``PayslipInput``.

    Amounts entered with ``period="annual"`` are divided by 12 and rounded.
    Every invalid field is reported at once via ``FormValidationError``.
    """
    try:
        form = PayslipForm.model_validate(dict(raw))
    except ValidationError as exc:
        errors: Dict[str, str] = {}
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else "__root__"
            errors.setdefault(field, _message_for(field, err["type"]))
        logger.info("Payslip form rejected: %s", errors)
        raise FormValidationError(errors) from exc

    amounts = {name: getattr(form, name) for name in AMOUNT_FIELDS}
    if form.period == "annual":
        amounts = {name: convert_period(value, "annual") for name, value in amounts.items()}

    return PayslipInput(month=form.month, **amounts)
