from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from ..calculator import SalaryRules, compute, convert_period
from ..collector import FormValidationError, collect
from ..schemas.payslip import CalculationRead, ConvertRead, ConvertRequest
from .settings import get_rules

router = APIRouter()


def validation_response(exc: FormValidationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"errors": exc.errors})


@router.post("/calculate", response_model=CalculationRead)
def calculate(raw: Dict[str, Any] = Body(...), rules: SalaryRules = Depends(get_rules)):
    try:
        payslip = collect(raw)
    except FormValidationError as e:
        return validation_response(e)
    return CalculationRead(input=payslip, result=compute(payslip, rules))


@router.post("/convert", response_model=ConvertRead)
def convert(req: ConvertRequest):
    return ConvertRead(
        amount=req.amount,
        from_period=req.from_period,
        converted=convert_period(req.amount, req.from_period),
    )
