import os
from dotenv import load_dotenv

from .calculator.rules import DEFAULT_RULES, SalaryRules

load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), "..", ".env"))


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./salary_decoder.db")

    # OpenAI-compatible chat completion gateway
    AI_GATEWAY_URL: str = os.getenv(
        "AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1/chat/completions"
    )
    AI_GATEWAY_API_KEY: str | None = os.getenv("AI_GATEWAY_API_KEY")
    AI_MODEL: str = os.getenv("AI_MODEL", "google/gemini-3-flash-preview")
    AI_TIMEOUT: float = _float_env("AI_TIMEOUT", 60)

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def salary_rules(self) -> SalaryRules:
        return SalaryRules(
            pf_rate=_float_env("PF_RATE", DEFAULT_RULES.pf_rate),
            pf_tolerance=_float_env("PF_TOLERANCE", DEFAULT_RULES.pf_tolerance),
            pf_ratio_min=_float_env("PF_RATIO_MIN", DEFAULT_RULES.pf_ratio_min),
            pf_ratio_max=_float_env("PF_RATIO_MAX", DEFAULT_RULES.pf_ratio_max),
            pt_monthly_max=_float_env("PT_MONTHLY_MAX", DEFAULT_RULES.pt_monthly_max),
            hra_percent_max=_float_env("HRA_PERCENT_MAX", DEFAULT_RULES.hra_percent_max),
        )


settings = Settings()
