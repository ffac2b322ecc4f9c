import streamlit as st

from core.calculators import comparison_frame
from core.formatting import (
    format_currency,
    format_currency_short,
    format_delta,
    format_number,
)
from core.presets import SCENARIO_LABELS
from core.state import CalculatorState


def scenario_key(index: int) -> str:
    return f"scenario_price_{index}"


def _on_scenario_change(state: CalculatorState, index: int):
    state.set_scenario_price(index, st.session_state[scenario_key(index)])


def render_comparison(state: CalculatorState):
    """Three editable price points and their payments next to each other."""
    head, button = st.columns([4, 1])
    head.subheader("Price Comparison")
    button.button("Reset", on_click=state.reset_scenarios)

    price_cols = st.columns(len(SCENARIO_LABELS))
    for i, price in enumerate(state.scenarios.prices):
        st.session_state[scenario_key(i)] = format_number(price)
        price_cols[i].text_input(
            f"{SCENARIO_LABELS[i]} price ($)",
            key=scenario_key(i),
            on_change=_on_scenario_change,
            args=(state, i),
        )

    comps = state.comparisons()
    cols = st.columns(len(comps) or 1)
    for col, c in zip(cols, comps):
        with col:
            st.markdown(f"**{c.label}** · {format_currency_short(c.result.price)}")
            if c.is_primary:
                st.caption("Current price")
                delta = None
            else:
                delta = format_delta(c.monthly_delta)
            st.metric(
                "Monthly",
                format_currency(c.result.monthly_payment),
                delta=delta,
                delta_color="inverse",
            )
            st.caption(f"Annual: {format_currency(c.result.annual_payment)}")
            st.caption(f"Down: {format_currency_short(c.result.down_payment)}")

    with st.expander("Table view"):
        st.dataframe(comparison_frame(comps), hide_index=True)
    return comps
