"""Single calculator state owned by the Streamlit session.

All inputs live on one :class:`CalculatorState` with explicit setters.  The
comparison prices are re-derived from the primary price inside
:meth:`CalculatorState.set_price`; nothing else writes to them except the
per-slot edit and reset operations.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import streamlit as st

from core.calculators import InvalidLoanError, compare_scenarios, compute
from core.formatting import parse_digits, parse_float
from core.models import LoanParameters, LoanResult, ScenarioComparison
from core.presets import LOAN_DEFAULTS, SCENARIO_LABELS
from core.rules import RuleResult, evaluate_rules, has_blocking
from core.scenarios import ScenarioSynchronizer

logger = logging.getLogger(__name__)

STATE_KEY = "calculator"


def _default_scenarios() -> ScenarioSynchronizer:
    return ScenarioSynchronizer(LOAN_DEFAULTS["price"])


@dataclass
class CalculatorState:
    price: int = LOAN_DEFAULTS["price"]
    annual_rate_pct: float = LOAN_DEFAULTS["annual_rate_pct"]
    term_years: int = LOAN_DEFAULTS["term_years"]
    down_payment_pct: float = LOAN_DEFAULTS["down_payment_pct"]
    scenarios: ScenarioSynchronizer = field(default_factory=_default_scenarios)
    last_result: Optional[LoanResult] = None
    last_comparisons: List[ScenarioComparison] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.scenarios.primary_price != self.price:
            self.scenarios.on_primary_price_changed(self.price)

    # --- setters -----------------------------------------------------------

    def set_price(self, raw_text) -> None:
        """Parse the price field; a changed price re-derives the scenarios."""
        price = parse_digits(raw_text)
        if price == self.price:
            return
        self.price = price
        self.scenarios.on_primary_price_changed(price)

    def set_rate(self, value) -> None:
        self.annual_rate_pct = parse_float(value)

    def set_term(self, value) -> None:
        self.term_years = int(parse_float(value))

    def set_down_pct(self, value) -> None:
        self.down_payment_pct = parse_float(value)

    def set_scenario_price(self, index: int, raw_text) -> None:
        self.scenarios.set_scenario_price(index, raw_text)

    def reset_scenarios(self) -> None:
        self.scenarios.reset()

    # --- derived values ----------------------------------------------------

    def params(self) -> LoanParameters:
        return LoanParameters(
            price=self.price,
            annual_rate_pct=self.annual_rate_pct,
            term_years=self.term_years,
            down_payment_pct=self.down_payment_pct,
        )

    def findings(self) -> List[RuleResult]:
        return evaluate_rules(self.params())

    def is_valid(self) -> bool:
        return not has_blocking(self.findings())

    def main_result(self) -> Optional[LoanResult]:
        """Current result, or the last valid one when inputs are degenerate."""
        try:
            self.last_result = compute(self.params())
        except InvalidLoanError as exc:
            logger.warning("Keeping previous result: %s", exc)
        return self.last_result

    def comparisons(self) -> List[ScenarioComparison]:
        try:
            self.last_comparisons = compare_scenarios(
                self.scenarios.prices, self.params(), SCENARIO_LABELS
            )
        except InvalidLoanError as exc:
            logger.warning("Keeping previous comparisons: %s", exc)
        return self.last_comparisons


def get_state() -> CalculatorState:
    """Return the session's calculator state, creating it on first use."""
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = CalculatorState()
    return st.session_state[STATE_KEY]
