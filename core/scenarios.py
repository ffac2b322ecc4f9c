from __future__ import annotations

from typing import List

from core.formatting import parse_digits
from core.presets import SCENARIO_COUNT, SCENARIO_STEP


def offset_prices(primary_price, step=SCENARIO_STEP) -> List[int]:
    """Comparison prices one ``step`` either side of the primary price."""
    return [primary_price - step, primary_price, primary_price + step]


class ScenarioSynchronizer:
    """Three comparison prices that follow the primary price.

    Changing the primary price re-derives every slot.  A slot edited by hand
    keeps its value until the next primary price change or :meth:`reset`;
    editing a slot never touches the primary price.
    """

    def __init__(self, primary_price, step=SCENARIO_STEP) -> None:
        self.step = step
        self.primary_price = primary_price
        self._prices: List[int] = offset_prices(primary_price, step)

    @property
    def prices(self) -> List[int]:
        return list(self._prices)

    def on_primary_price_changed(self, new_primary_price) -> None:
        self.primary_price = new_primary_price
        self._prices = offset_prices(new_primary_price, self.step)

    def set_scenario_price(self, index: int, raw_text) -> int:
        """Overwrite one slot from user text and return the parsed price."""
        if not 0 <= index < SCENARIO_COUNT:
            raise IndexError(f"Scenario index must be between 0 and {SCENARIO_COUNT - 1}, got {index}.")
        price = parse_digits(raw_text)
        self._prices[index] = price
        return price

    def reset(self) -> None:
        self.on_primary_price_changed(self.primary_price)
