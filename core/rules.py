from __future__ import annotations
from typing import Literal, List, Dict, Any
from pydantic import BaseModel, Field

from core.models import LoanParameters


class RuleResult(BaseModel):
    code: str
    severity: Literal["info", "warn", "critical"]
    message: str
    context: Dict[str, Any] = Field(default_factory=dict)


def evaluate_rules(params: LoanParameters) -> List[RuleResult]:
    res: List[RuleResult] = []

    if params.term_years < 1:
        res.append(
            RuleResult(
                code="TERM_INVALID",
                severity="critical",
                message="Loan term must be at least 1 year; showing the last valid result.",
                context={"term_years": params.term_years},
            )
        )

    if params.annual_rate_pct < 0:
        res.append(
            RuleResult(
                code="RATE_NEGATIVE",
                severity="warn",
                message="Interest rate is negative.",
                context={"annual_rate_pct": params.annual_rate_pct},
            )
        )

    if not 0 <= params.down_payment_pct <= 100:
        res.append(
            RuleResult(
                code="DOWN_PCT_OUT_OF_RANGE",
                severity="warn",
                message="Down payment should be between 0% and 100% of the price.",
                context={"down_payment_pct": params.down_payment_pct},
            )
        )

    if params.price <= 0:
        res.append(
            RuleResult(
                code="PRICE_ZERO",
                severity="info",
                message="Enter a property price to see payments.",
            )
        )

    return res


def has_blocking(res: List[RuleResult]) -> bool:
    return any(r.severity == "critical" for r in res)
