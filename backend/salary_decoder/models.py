from sqlalchemy import Column, Integer, String, DateTime, Float
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class SavedPayslip(Base):
    __tablename__ = 'payslips'

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(String, nullable=False, index=True)
    month = Column(String, nullable=False)
    basic = Column(Float, nullable=False, default=0)
    gross_salary = Column(Float, nullable=False, default=0)
    in_hand_salary = Column(Float, nullable=False, default=0)
    ctc = Column(Float, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
