DISCLAIMER = ("Payments are estimates for a fixed-rate, fully amortizing loan and are rounded to whole dollars. "
"Taxes, insurance, fees and lender overlays are not included. Confirm final figures with your lender.")

# Starting inputs shown on first load.
LOAN_DEFAULTS = {"price": 4400000, "annual_rate_pct": 8.5, "term_years": 25, "down_payment_pct": 20.0}

# Comparison prices sit one step below and above the primary price.
SCENARIO_STEP = 1000000
SCENARIO_COUNT = 3
SCENARIO_LABELS = ["Lower", "Current", "Higher"]

CURRENCY_SYMBOL = "$"

# Largest price the text fields accept; longer digit strings are clamped.
MAX_PRICE = 10 ** 15
