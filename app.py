import logging

import streamlit as st

from core.presets import DISCLAIMER
from core.state import get_state
from core.version import __version__
from ui.comparison import render_comparison
from ui.inputs import render_loan_inputs
from ui.results import render_main_result


def render_calculator():
    """Inputs, main result and the price comparison for the session state."""
    state = get_state()
    with st.container(border=True):
        st.subheader("Loan Calculator")
        render_loan_inputs(state)
        render_main_result(state)
    with st.container(border=True):
        render_comparison(state)
    return state


def main():
    logging.basicConfig(level=logging.INFO)
    st.set_page_config(page_title="Loan Calculator", layout="wide")
    st.title("Loan Calculator")
    st.caption(f"Calculate loan payments and compare different scenarios · v{__version__}")
    render_calculator()
    st.caption(DISCLAIMER)


if __name__ == "__main__":
    main()
