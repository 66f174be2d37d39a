from typing import List

from ..domain.salary import BreakdownRow, PayslipInput, PayslipResult
from .formatting import format_inr, round_half_up
from .rules import DEFAULT_RULES, SalaryRules

# (label, field, kind) in display order
BREAKDOWN_ROWS = (
    ("Basic Salary", "basic", "earning"),
    ("HRA", "hra", "earning"),
    ("Special Allowance", "special_allowance", "earning"),
    ("Other Allowances", "other_allowance", "earning"),
    ("Employee PF", "employee_pf", "deduction"),
    ("Professional Tax", "professional_tax", "deduction"),
    ("Income Tax", "income_tax", "deduction"),
    ("Employer PF", "employer_pf", "employer"),
)


def _check_pf(p: PayslipInput, rules: SalaryRules) -> List[str]:
    warnings: List[str] = []

    expected_pf = round_half_up(p.basic * rules.pf_rate)
    if p.basic > 0 and abs(p.employee_pf - expected_pf) > rules.pf_tolerance:
        warnings.append(
            f"Your Employee PF ({format_inr(p.employee_pf)}) differs from the standard "
            f"{rules.pf_rate * 100:g}% of basic salary ({format_inr(expected_pf)}). "
            "This could be due to a different PF rate or a cap on PF-eligible salary."
        )

    if p.employee_pf > 0 and p.employer_pf > 0:
        ratio = p.employer_pf / p.employee_pf
        if ratio < rules.pf_ratio_min or ratio > rules.pf_ratio_max:
            warnings.append(
                f"Employer PF ({format_inr(p.employer_pf)}) and Employee PF "
                f"({format_inr(p.employee_pf)}) don't match closely. Usually both are equal."
            )
    return warnings


def _check_professional_tax(p: PayslipInput, rules: SalaryRules) -> List[str]:
    if p.professional_tax > rules.pt_monthly_max:
        return [
            f"Professional Tax ({format_inr(p.professional_tax)}) exceeds the usual monthly "
            f"maximum of {format_inr(rules.pt_monthly_max)}/month. Please verify."
        ]
    return []


def _check_hra(p: PayslipInput, rules: SalaryRules) -> List[str]:
    if p.basic > 0 and p.hra > 0:
        hra_percent = p.hra / p.basic * 100
        if hra_percent > rules.hra_percent_max:
            return [
                f"HRA is {hra_percent:.1f}% of your basic salary, which is higher than the "
                f"usual {rules.hra_usual_band}. This may affect HRA tax exemption."
            ]
    return []


def _breakdown(p: PayslipInput, ctc: float) -> List[BreakdownRow]:
    rows = []
    for label, field, kind in BREAKDOWN_ROWS:
        amount = getattr(p, field)
        percentage = amount / ctc * 100 if ctc > 0 else 0
        rows.append(BreakdownRow(label=label, amount=amount, kind=kind, percentage=percentage))
    return [r for r in rows if r.amount != 0]


def compute(p: PayslipInput, rules: SalaryRules = DEFAULT_RULES) -> PayslipResult:
    """Derive gross, deductions, in-hand and CTC figures from monthly inputs.

    Never raises and never validates: negative or odd values simply flow
    through the arithmetic. Warnings are advisory and independent of each
    other.
    """
    gross_salary = p.basic + p.hra + p.special_allowance + p.other_allowance
    total_deductions = p.employee_pf + p.professional_tax + p.income_tax
    in_hand_salary = gross_salary - total_deductions
    # employer PF is part of CTC but never leaves the employee's pay
    ctc = gross_salary + p.employer_pf

    warnings = _check_pf(p, rules) + _check_professional_tax(p, rules) + _check_hra(p, rules)

    return PayslipResult(
        gross_salary=gross_salary,
        total_deductions=total_deductions,
        in_hand_salary=in_hand_salary,
        ctc=ctc,
        warnings=warnings,
        breakdown=_breakdown(p, ctc),
    )
