from pydantic import BaseModel, ConfigDict, Field


class LoanParameters(BaseModel):
    price: float = 4400000.0
    annual_rate_pct: float = 8.5
    term_years: int = 25
    down_payment_pct: float = 20.0


class LoanResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: float = 0.0
    down_payment: int = 0
    loan_amount: int = 0
    monthly_payment: int = 0
    annual_payment: int = 0


class ScenarioComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str = ""
    result: LoanResult = Field(default_factory=LoanResult)
    is_primary: bool = False
    monthly_delta: int = 0
