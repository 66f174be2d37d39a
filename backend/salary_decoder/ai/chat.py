import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .gateway import ChatGateway, GatewayError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are SalaryDecoder AI, a friendly assistant that answers questions about Indian salaries and payslips.

Topics you can help with: CTC, gross and in-hand salary, Basic, HRA, special allowances, PF (employee and employer), professional tax, TDS, and how to read a payslip.

Rules:
- Answer in SIMPLE English for someone with no finance background
- Keep answers short, use bullet points where useful
- Use the ₹ symbol for amounts
- NEVER give legal or tax advice, suggest a qualified professional for specifics
- Politely decline questions unrelated to salaries or payslips

Format your response in markdown."""

FALLBACK_REPLY = "Sorry, something went wrong. Please try again in a moment."
EMPTY_REPLY = "Sorry, I couldn't process that. Please try again."


@dataclass
class ChatReply:
    content: str
    error: Optional[str] = None


def reply(messages: List[Dict[str, str]], gateway: ChatGateway) -> ChatReply:
    """Relay the running conversation to the gateway and return its answer."""
    payload = [{"role": "system", "content": SYSTEM_PROMPT}]
    payload += [{"role": m["role"], "content": m["content"]} for m in messages]
    try:
        content = gateway.complete(payload)
    except GatewayError as exc:
        logger.warning("salary-chat failed: %s", exc)
        return ChatReply(content=FALLBACK_REPLY, error=exc.user_message)
    return ChatReply(content=content or EMPTY_REPLY)
