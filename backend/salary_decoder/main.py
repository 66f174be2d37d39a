from fastapi import FastAPI
from .routers import assistant, payslip, salary, settings as settings_router
from .config import settings
from .database import engine
from . import models
import logging

# Ensure application logs show informative messages
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(levelname)s:%(name)s:%(message)s"
)

models.Base.metadata.create_all(bind=engine)

app = FastAPI(title="SalaryDecoder API")

app.include_router(salary.router, prefix="/api/salary", tags=["salary"])
app.include_router(assistant.router, prefix="/api", tags=["assistant"])
app.include_router(payslip.router, prefix="/api/payslip", tags=["payslip"])
app.include_router(settings_router.router, prefix="/api/settings", tags=["settings"])

@app.get("/")
def read_root():
    return {"message": "SalaryDecoder API"}
