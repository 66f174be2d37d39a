import os
import tempfile

# point the app at a throwaway database before it is imported
_DB_DIR = tempfile.mkdtemp(prefix="salary_decoder_test_")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_DB_DIR, "test.db")
os.environ.pop("AI_GATEWAY_API_KEY", None)

import pytest
from fastapi.testclient import TestClient

from backend.salary_decoder.ai.gateway import GatewayError, get_gateway
from backend.salary_decoder.domain.salary import PayslipInput
from backend.salary_decoder.main import app
from backend.salary_decoder.routers import settings as settings_router


class FakeGateway:
    """Stands in for the chat-completion gateway; records what it was sent."""

    def __init__(self, reply="**Basic** is your base pay.", error: GatewayError | None = None):
        self.reply = reply
        self.error = error
        self.calls = []

    def complete(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def fake_gateway():
    gateway = FakeGateway()
    app.dependency_overrides[get_gateway] = lambda: gateway
    yield gateway
    app.dependency_overrides.pop(get_gateway, None)


@pytest.fixture(autouse=True)
def restore_rules():
    original = settings_router.RULES["current"]
    yield
    settings_router.RULES["current"] = original


@pytest.fixture
def scenario_a():
    return PayslipInput(
        month="January",
        basic=15000,
        hra=6000,
        special_allowance=2000,
        other_allowance=0,
        employee_pf=1800,
        employer_pf=1800,
        professional_tax=200,
        income_tax=500,
    )


@pytest.fixture
def form_a():
    return {
        "month": "January",
        "basic": 15000,
        "hra": 6000,
        "special_allowance": 2000,
        "other_allowance": 0,
        "employee_pf": 1800,
        "employer_pf": 1800,
        "professional_tax": 200,
        "income_tax": 500,
    }
