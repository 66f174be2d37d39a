from dataclasses import dataclass, fields, replace


@dataclass(frozen=True)
class SalaryRules:
    """Rule-of-thumb thresholds for payslip warnings.

    These are common Indian payroll conventions, not tax law. They vary
    between states and years, so they can be tuned through the environment
    or the settings API.
    """

    pf_rate: float = 0.12
    pf_tolerance: float = 100
    pf_ratio_min: float = 0.8
    pf_ratio_max: float = 1.2
    pt_monthly_max: float = 2500
    hra_percent_max: float = 60
    hra_usual_band: str = "40-50%"

    def updated(self, **changes) -> "SalaryRules":
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ValueError(f"Unknown rule(s): {', '.join(sorted(unknown))}")
        return replace(self, **changes)


DEFAULT_RULES = SalaryRules()
