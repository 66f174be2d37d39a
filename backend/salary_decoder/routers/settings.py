from dataclasses import asdict

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..calculator.rules import SalaryRules
from ..config import settings

router = APIRouter()

# simple in-memory store
RULES: dict[str, SalaryRules] = {"current": settings.salary_rules()}


def get_rules() -> SalaryRules:
    return RULES["current"]


class RulesUpdate(BaseModel):
    pf_rate: float | None = Field(None, gt=0, le=1)
    pf_tolerance: float | None = Field(None, ge=0)
    pf_ratio_min: float | None = Field(None, gt=0)
    pf_ratio_max: float | None = Field(None, gt=0)
    pt_monthly_max: float | None = Field(None, ge=0)
    hra_percent_max: float | None = Field(None, gt=0)
    hra_usual_band: str | None = None


@router.get('/rules')
def read_rules():
    return asdict(get_rules())


@router.post('/rules')
def update_rules(data: RulesUpdate):
    changes = data.model_dump(exclude_none=True)
    rules = get_rules().updated(**changes)
    if rules.pf_ratio_min > rules.pf_ratio_max:
        raise HTTPException(status_code=400, detail="pf_ratio_min must not exceed pf_ratio_max")
    RULES["current"] = rules
    return asdict(rules)
