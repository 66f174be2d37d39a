from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from ..ai import chat, explainer
from ..ai.gateway import ChatGateway, get_gateway
from ..calculator import SalaryRules, compute
from ..collector import FormValidationError, collect
from ..schemas.payslip import ChatRead, ChatRequest, ExplanationRead
from .salary import validation_response
from .settings import get_rules

router = APIRouter()


@router.post("/explain", response_model=ExplanationRead)
def explain_salary(
    raw: Dict[str, Any] = Body(...),
    rules: SalaryRules = Depends(get_rules),
    gateway: ChatGateway = Depends(get_gateway),
):
    try:
        payslip = collect(raw)
    except FormValidationError as e:
        return validation_response(e)

    result = explainer.explain(payslip, compute(payslip, rules), gateway)
    if result.error:
        return JSONResponse(status_code=result.status_code, content={"error": result.error})
    return ExplanationRead(text=result.text)


@router.post("/chat", response_model=ChatRead)
def salary_chat(req: ChatRequest, gateway: ChatGateway = Depends(get_gateway)):
    answer = chat.reply([m.model_dump() for m in req.messages], gateway)
    return ChatRead(content=answer.content, error=answer.error)
