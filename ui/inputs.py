import streamlit as st

from core.formatting import format_number
from core.state import CalculatorState

PRICE_KEY = "price_text"
RATE_KEY = "rate_pct"
TERM_KEY = "term_years"
DOWN_KEY = "down_pct"


def _on_price_change(state: CalculatorState):
    state.set_price(st.session_state[PRICE_KEY])


def _on_rate_change(state: CalculatorState):
    state.set_rate(st.session_state[RATE_KEY])


def _on_term_change(state: CalculatorState):
    state.set_term(st.session_state[TERM_KEY])


def _on_down_change(state: CalculatorState):
    state.set_down_pct(st.session_state[DOWN_KEY])


def render_loan_inputs(state: CalculatorState):
    """Price, rate, term and down payment inputs in one row.

    Widgets are re-seeded from ``state`` on every run so a typed price like
    ``4400000`` comes back formatted as ``4,400,000``.
    """
    st.session_state[PRICE_KEY] = format_number(state.price)
    st.session_state[RATE_KEY] = float(state.annual_rate_pct)
    st.session_state[TERM_KEY] = int(state.term_years)
    st.session_state[DOWN_KEY] = float(state.down_payment_pct)

    cols = st.columns(4)
    cols[0].text_input(
        "Property Price ($)",
        key=PRICE_KEY,
        placeholder="4,400,000",
        on_change=_on_price_change,
        args=(state,),
    )
    cols[1].number_input(
        "Rate (%)",
        step=0.1,
        key=RATE_KEY,
        on_change=_on_rate_change,
        args=(state,),
    )
    cols[2].number_input(
        "Years",
        step=1,
        key=TERM_KEY,
        on_change=_on_term_change,
        args=(state,),
    )
    cols[3].number_input(
        "Down (%)",
        step=0.1,
        key=DOWN_KEY,
        on_change=_on_down_change,
        args=(state,),
    )
    return state.params()
