from __future__ import annotations

import logging
import math
from typing import List

import pandas as pd

from core.models import LoanParameters, LoanResult, ScenarioComparison

logger = logging.getLogger(__name__)


class InvalidLoanError(ValueError):
    """Raised when loan parameters cannot produce a finite payment."""


def nz(x, default=0.0):
    """Return a float for ``x`` or a fallback value.

    Text fields in the calculator can be cleared mid-edit, which leaves
    ``None`` or ``NaN`` behind.  Treating those as ``0`` keeps the math from
    breaking while the user is still typing.
    """

    try:
        if x is None or (isinstance(x, float) and math.isnan(x)):
            return default
        return float(x)
    except Exception:
        return default


def round_whole(x) -> int:
    """Round half up to a whole currency unit."""

    return int(math.floor(nz(x) + 0.5))


def monthly_payment(principal, annual_rate_pct, term_years):
    """Calculate the fully amortizing monthly payment for a loan.

    ``principal`` is the starting loan amount, ``annual_rate_pct`` is the
    nominal yearly interest rate (e.g. ``8.5`` for 8.5%), and ``term_years``
    is the amortization period in years.  A zero rate falls back to
    straight-line repayment.  A term shorter than one payment raises
    :class:`InvalidLoanError` instead of returning ``inf``/``nan``.
    """

    L = nz(principal)
    r = nz(annual_rate_pct) / 100 / 12
    n = int(nz(term_years) * 12)
    if n <= 0:
        raise InvalidLoanError(f"Loan term must be at least one month, got {term_years!r} years.")
    if r == 0:
        return L / n
    try:
        discount = (1 + r) ** (-n)
    except (OverflowError, ZeroDivisionError):
        # only reachable with negative rates; the payment tends to zero
        return 0.0
    if discount == 1:
        return L / n
    return (r * L) / (1 - discount)


def compute_loan(price, annual_rate_pct, term_years, down_payment_pct) -> LoanResult:
    """Down payment, loan amount and payments for a purchase.

    All currency figures are rounded to whole units.  The annual payment is
    twelve times the *rounded* monthly payment so the two always agree on
    screen.  Down payment percentages outside ``[0, 100]`` are accepted and
    simply produce unusual results.
    """

    price = nz(price)
    down_payment = price * (nz(down_payment_pct) / 100)
    loan_amount = price - down_payment
    payment = monthly_payment(loan_amount, annual_rate_pct, term_years)
    if not math.isfinite(payment):
        raise InvalidLoanError(f"Payment is not finite for rate {annual_rate_pct!r}% over {term_years!r} years.")
    monthly = round_whole(payment)
    return LoanResult(
        price=price,
        down_payment=round_whole(down_payment),
        loan_amount=round_whole(loan_amount),
        monthly_payment=monthly,
        annual_payment=monthly * 12,
    )


def compute(params: LoanParameters) -> LoanResult:
    return compute_loan(
        params.price,
        params.annual_rate_pct,
        params.term_years,
        params.down_payment_pct,
    )


def compare_to_main(result: LoanResult, main: LoanResult, label: str = "") -> ScenarioComparison:
    """Pair a comparison result with its monthly difference from ``main``."""

    return ScenarioComparison(
        label=label,
        result=result,
        is_primary=result.price == main.price,
        monthly_delta=result.monthly_payment - main.monthly_payment,
    )


def compare_scenarios(prices: List[float], params: LoanParameters, labels: List[str] = None) -> List[ScenarioComparison]:
    """Run each comparison price through the calculator with the main terms."""

    main = compute(params)
    labels = labels or [""] * len(prices)
    out = []
    for price, label in zip(prices, labels):
        res = compute_loan(price, params.annual_rate_pct, params.term_years, params.down_payment_pct)
        out.append(compare_to_main(res, main, label))
    logger.debug("Compared %d scenarios against price %s", len(out), params.price)
    return out


def comparison_frame(comparisons: List[ScenarioComparison]) -> pd.DataFrame:
    """Tabulate scenario comparisons, one row per scenario."""

    columns = [
        "Scenario",
        "Price",
        "MonthlyPayment",
        "AnnualPayment",
        "DownPayment",
        "LoanAmount",
        "MonthlyDelta",
        "IsPrimary",
    ]
    if not comparisons:
        return pd.DataFrame(columns=columns)
    rows = [
        {
            "Scenario": c.label,
            "Price": c.result.price,
            "MonthlyPayment": c.result.monthly_payment,
            "AnnualPayment": c.result.annual_payment,
            "DownPayment": c.result.down_payment,
            "LoanAmount": c.result.loan_amount,
            "MonthlyDelta": c.monthly_delta,
            "IsPrimary": c.is_primary,
        }
        for c in comparisons
    ]
    return pd.DataFrame(rows, columns=columns)
