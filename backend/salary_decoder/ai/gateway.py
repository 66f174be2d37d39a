import logging
from typing import Dict, List, Optional

import requests

from ..config import settings

logger = logging.getLogger(__name__)


class GatewayError(RuntimeError):
    """Base class for language-model gateway failures."""

    status_code = 502
    user_message = "AI service is unavailable right now. Please try again later."


class GatewayNotConfigured(GatewayError):
    status_code = 503
    user_message = "AI explanations are not configured on this server."


class RateLimited(GatewayError):
    status_code = 429
    user_message = "Rate limit exceeded. Please try again in a moment."


class QuotaExhausted(GatewayError):
    status_code = 402
    user_message = "AI credits exhausted. Please try again later."


class GatewayUnavailable(GatewayError):
    pass


class ChatGateway:
    """Client for an OpenAI-compatible chat-completion endpoint."""

    def __init__(
        self,
        url: Optional[str] = None,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.url = url or settings.AI_GATEWAY_URL
        self.api_key = api_key if api_key is not None else settings.AI_GATEWAY_API_KEY
        self.model = model or settings.AI_MODEL
        self.timeout = timeout or settings.AI_TIMEOUT

    def complete(self, messages: List[Dict[str, str]]) -> str:
        """Send ``messages`` and return the assistant reply text ("" if none)."""
        if not self.api_key:
            raise GatewayNotConfigured("AI_GATEWAY_API_KEY is not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {"model": self.model, "messages": messages}

        try:
            resp = requests.post(self.url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("AI gateway request failed: %s", exc)
            raise GatewayUnavailable(str(exc)) from exc

        if resp.status_code == 429:
            raise RateLimited("AI gateway rate limited the request")
        if resp.status_code == 402:
            raise QuotaExhausted("AI gateway credits exhausted")
        if not resp.ok:
            logger.error("AI gateway error: %s %s", resp.status_code, resp.text[:500])
            raise GatewayUnavailable(f"AI gateway error {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise GatewayUnavailable("AI gateway returned invalid JSON") from exc

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise GatewayUnavailable("AI gateway response shape changed") from exc

        return content or ""


def get_gateway() -> ChatGateway:
    return ChatGateway()
