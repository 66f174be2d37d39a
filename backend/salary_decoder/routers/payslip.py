from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import store
from ..calculator import SalaryRules, compute
from ..collector import FormValidationError, collect
from ..database import get_db
from ..identity import get_owner_id
from ..schemas.payslip import SavedPayslipRead
from .salary import validation_response
from .settings import get_rules

router = APIRouter()


@router.post("/save", response_model=SavedPayslipRead)
def save(
    raw: Dict[str, Any] = Body(...),
    owner_id: str = Depends(get_owner_id),
    rules: SalaryRules = Depends(get_rules),
    db: Session = Depends(get_db),
):
    try:
        payslip = collect(raw)
    except FormValidationError as e:
        return validation_response(e)
    record = store.save(db, owner_id, payslip, compute(payslip, rules))
    return SavedPayslipRead.model_validate(record)


@router.get("/", response_model=list[SavedPayslipRead])
def list_all(owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    return [SavedPayslipRead.model_validate(p) for p in store.list_for_owner(db, owner_id)]


@router.delete("/delete")
def delete_payslip(
    payslip_id: int,
    owner_id: str = Depends(get_owner_id),
    db: Session = Depends(get_db),
):
    if not store.delete(db, owner_id, payslip_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"status": "deleted"}


@router.get("/{payslip_id}", response_model=SavedPayslipRead)
def get_one(
    payslip_id: int,
    owner_id: str = Depends(get_owner_id),
    db: Session = Depends(get_db),
):
    p = store.get(db, owner_id, payslip_id)
    if not p:
        raise HTTPException(status_code=404, detail="Not found")
    return SavedPayslipRead.model_validate(p)
