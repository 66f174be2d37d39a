import pytest

from backend.salary_decoder.collector import FormValidationError, collect


def test_collect_monthly(form_a, scenario_a):
    assert collect(form_a) == scenario_a


def test_collect_accepts_numeric_strings():
    p = collect({"month": "April", "basic": "25000", "hra": "10000.0"})
    assert p.basic == 25000
    assert p.hra == 10000
    assert p.income_tax == 0


def test_collect_annual_is_normalised_to_monthly():
    p = collect({"month": "April", "period": "annual", "basic": 180000, "hra": 100000, "professional_tax": 2500})
    assert p.basic == 15000
    assert p.hra == 8333
    assert p.professional_tax == 208


def test_collect_reports_every_bad_field():
    with pytest.raises(FormValidationError) as exc:
        collect({"month": "", "basic": "abc", "hra": -1, "income_tax": None})
    assert exc.value.errors == {
        "month": "Select a month",
        "basic": "Enter a valid number",
        "hra": "Must be 0 or more",
        "income_tax": "Enter a valid number",
    }


def test_collect_requires_month():
    with pytest.raises(FormValidationError) as exc:
        collect({"basic": 100})
    assert exc.value.errors == {"month": "Select a month"}


def test_collect_rejects_unknown_period():
    with pytest.raises(FormValidationError) as exc:
        collect({"month": "May", "period": "weekly"})
    assert "period" in exc.value.errors


def test_collect_rejects_infinity():
    with pytest.raises(FormValidationError) as exc:
        collect({"month": "May", "basic": float("inf")})
    assert exc.value.errors == {"basic": "Enter a valid number"}


def test_collect_rejects_unrecognised_field_names():
    with pytest.raises(FormValidationError) as exc:
        collect({"month": "May", "basic": 15000, "specialAllowance": 5000, "employeePF": 1800})
    assert exc.value.errors == {
        "specialAllowance": "Unknown field",
        "employeePF": "Unknown field",
    }


@pytest.mark.parametrize("value", [True, False])
def test_collect_rejects_booleans(value):
    with pytest.raises(FormValidationError) as exc:
        collect({"month": "May", "basic": value})
    assert exc.value.errors == {"basic": "Enter a valid number"}


def test_collect_rejects_amounts_that_would_overflow():
    with pytest.raises(FormValidationError) as exc:
        collect({"month": "May", "basic": 1e308, "hra": 1e308})
    assert exc.value.errors == {
        "basic": "Amount is too large",
        "hra": "Amount is too large",
    }


def test_collect_accepts_largest_amount():
    p = collect({"month": "May", "basic": 1e12})
    assert p.basic == 1e12
