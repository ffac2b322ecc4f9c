from streamlit.testing.v1 import AppTest

from core.calculators import compute_loan
from core.formatting import format_currency, format_currency_short


def calculator_app():
    import app

    app.render_calculator()


def _metric(at, label):
    return next(m for m in at.metric if m.label == label)


def _text(at, label):
    return next(w for w in at.text_input if w.label == label)


def test_main_result_uses_defaults():
    at = AppTest.from_function(calculator_app)
    at.run()
    expected = compute_loan(4400000, 8.5, 25, 20)
    assert _metric(at, "Monthly Payment").value == format_currency(expected.monthly_payment)
    assert _metric(at, "Annual Payment").value == format_currency(expected.annual_payment)
    assert _metric(at, "Down Payment").value == format_currency_short(880000)
    assert _text(at, "Property Price ($)").value == "4,400,000"
    assert [_text(at, f"{label} price ($)").value for label in ("Lower", "Current", "Higher")] == [
        "3,400,000",
        "4,400,000",
        "5,400,000",
    ]


def test_rate_and_term_update_payment():
    at = AppTest.from_function(calculator_app)
    at.run()
    next(w for w in at.number_input if w.label == "Rate (%)").set_value(7.0)
    at.run()
    next(w for w in at.number_input if w.label == "Years").set_value(15)
    at.run()
    expected = compute_loan(4400000, 7.0, 15, 20)
    assert _metric(at, "Monthly Payment").value == format_currency(expected.monthly_payment)


def test_price_change_resets_comparison():
    at = AppTest.from_function(calculator_app)
    at.run()
    _text(at, "Lower price ($)").set_value("$1,000,000")
    at.run()
    assert at.session_state["calculator"].scenarios.prices == [1000000, 4400000, 5400000]

    _text(at, "Property Price ($)").set_value("5000000")
    at.run()
    assert at.session_state["calculator"].scenarios.prices == [4000000, 5000000, 6000000]
    assert _text(at, "Property Price ($)").value == "5,000,000"
    assert _text(at, "Lower price ($)").value == "4,000,000"


def test_reset_button_restores_offsets():
    at = AppTest.from_function(calculator_app)
    at.run()
    _text(at, "Higher price ($)").set_value("abc")
    at.run()
    assert at.session_state["calculator"].scenarios.prices[2] == 0
    next(b for b in at.button if b.label == "Reset").click()
    at.run()
    assert at.session_state["calculator"].scenarios.prices == [3400000, 4400000, 5400000]
    assert _text(at, "Higher price ($)").value == "5,400,000"


def test_zero_term_shows_invalid_and_keeps_result():
    at = AppTest.from_function(calculator_app)
    at.run()
    before = _metric(at, "Monthly Payment").value
    next(w for w in at.number_input if w.label == "Years").set_value(0)
    at.run()
    assert any("TERM_INVALID" in e.value for e in at.error)
    assert _metric(at, "Monthly Payment").value == before
    assert not at.exception


def test_high_rate_long_term_renders_payment():
    at = AppTest.from_function(calculator_app)
    at.run()
    next(w for w in at.number_input if w.label == "Rate (%)").set_value(100.0)
    at.run()
    next(w for w in at.number_input if w.label == "Years").set_value(730)
    at.run()
    assert not at.exception
    expected = compute_loan(4400000, 100.0, 730, 20)
    assert _metric(at, "Monthly Payment").value == format_currency(expected.monthly_payment)


def test_out_of_range_rate_and_down_payment_are_flagged():
    at = AppTest.from_function(calculator_app)
    at.run()
    next(w for w in at.number_input if w.label == "Rate (%)").set_value(-1.0)
    at.run()
    next(w for w in at.number_input if w.label == "Down (%)").set_value(120.0)
    at.run()
    warnings = " ".join(w.value for w in at.warning)
    assert "RATE_NEGATIVE" in warnings
    assert "DOWN_PCT_OUT_OF_RANGE" in warnings
    assert not at.exception
