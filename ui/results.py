import streamlit as st

from core.formatting import format_currency, format_currency_short
from core.state import CalculatorState


def render_findings(findings):
    """Show rule findings by severity."""
    for r in findings:
        if r.severity == "critical":
            st.error(f"[{r.code}] {r.message}")
        elif r.severity == "warn":
            st.warning(f"[{r.code}] {r.message}")
        else:
            st.info(f"[{r.code}] {r.message}")


def render_main_result(state: CalculatorState):
    render_findings(state.findings())
    result = state.main_result()
    if result is None:
        st.caption("Invalid input")
        return None
    cols = st.columns(4)
    cols[0].metric("Monthly Payment", format_currency(result.monthly_payment))
    cols[1].metric("Annual Payment", format_currency(result.annual_payment))
    cols[2].metric("Down Payment", format_currency_short(result.down_payment))
    cols[3].metric("Loan Amount", format_currency_short(result.loan_amount))
    if not state.is_valid():
        st.caption("Invalid input: showing the last valid result.")
    return result
