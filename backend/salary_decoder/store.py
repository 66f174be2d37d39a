"""Flattened snapshots of computed payslips, scoped by owner."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from . import models
from .domain.salary import PayslipInput, PayslipResult

logger = logging.getLogger(__name__)


def save(db: Session, owner_id: str, p: PayslipInput, result: PayslipResult) -> models.SavedPayslip:
    record = models.SavedPayslip(
        owner_id=owner_id,
        month=p.month,
        basic=p.basic,
        gross_salary=result.gross_salary,
        in_hand_salary=result.in_hand_salary,
        ctc=result.ctc,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("Saved payslip %s for owner %s", record.id, owner_id)
    return record


def list_for_owner(db: Session, owner_id: str) -> List[models.SavedPayslip]:
    return (
        db.query(models.SavedPayslip)
        .filter(models.SavedPayslip.owner_id == owner_id)
        .order_by(models.SavedPayslip.created_at.desc(), models.SavedPayslip.id.desc())
        .all()
    )


def get(db: Session, owner_id: str, payslip_id: int) -> Optional[models.SavedPayslip]:
    record = db.get(models.SavedPayslip, payslip_id)
    if record is None or record.owner_id != owner_id:
        return None
    return record


def delete(db: Session, owner_id: str, payslip_id: int) -> bool:
    record = get(db, owner_id, payslip_id)
    if record is None:
        return False
    db.delete(record)
    db.commit()
    logger.info("Deleted payslip %s for owner %s", payslip_id, owner_id)
    return True
