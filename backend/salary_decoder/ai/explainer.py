import logging
from dataclasses import dataclass
from typing import Optional

from ..calculator.formatting import format_inr
from ..domain.salary import PayslipInput, PayslipResult
from .gateway import ChatGateway, GatewayError

logger = logging.getLogger(__name__)

# ------------ system prompt ------------ #
SYSTEM_PROMPT = """You are SalaryDecoder AI, a friendly, beginner-level salary explainer for Indian employees.

Your job is to explain the user's payslip in SIMPLE English. Assume the user has NO finance background.

Rules:
- Explain each component in 1-2 simple sentences
- Use real-world analogies (e.g., "PF is like a piggy bank your company and you both put money into")
- Highlight any unusual values (e.g., PF not matching 12% of basic)
- Mention what's mandatory vs optional
- Use bullet points and headers for readability
- Add a brief summary at the end
- Use the ₹ symbol for amounts
- You can use a mix of English and Hindi words (Hinglish) if it makes things clearer
- NEVER give legal or tax advice, always add a disclaimer
- Keep the tone friendly and supportive, like explaining to a friend

Format your response in markdown with headers and bullet points."""

EMPTY_REPLY = "Could not generate explanation."

INPUT_LABELS = (
    ("Basic Salary", "basic"),
    ("HRA", "hra"),
    ("Special Allowance", "special_allowance"),
    ("Other Allowances", "other_allowance"),
    ("Employee PF", "employee_pf"),
    ("Employer PF", "employer_pf"),
    ("Professional Tax", "professional_tax"),
    ("Income Tax (TDS)", "income_tax"),
)


@dataclass
class Explanation:
    text: Optional[str] = None
    error: Optional[str] = None
    status_code: int = 200


def build_summary(p: PayslipInput, result: PayslipResult) -> str:
    """Plain-text rendering of a payslip and its derived figures."""
    lines = [f"Month: {p.month}"]
    lines += [f"{label}: {format_inr(getattr(p, field))}" for label, field in INPUT_LABELS]
    lines += [
        "---",
        f"Gross Salary: {format_inr(result.gross_salary)}",
        f"Total Deductions: {format_inr(result.total_deductions)}",
        f"In-Hand Salary: {format_inr(result.in_hand_salary)}",
        f"CTC: {format_inr(result.ctc)}",
    ]
    if result.warnings:
        lines += ["", "Warnings: " + "; ".join(result.warnings)]
    return "\n".join(lines)


def explain(p: PayslipInput, result: PayslipResult, gateway: ChatGateway) -> Explanation:
    """Ask the gateway for a lay explanation; failures come back as ``error``."""
    summary = build_summary(p, result)
    messages = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": f"Please explain this payslip in simple terms:\n\n{summary}"},
    ]
    try:
        text = gateway.complete(messages)
    except GatewayError as exc:
        logger.warning("explain-salary failed: %s", exc)
        return Explanation(error=exc.user_message, status_code=exc.status_code)

    return Explanation(text=text or EMPTY_REPLY)
