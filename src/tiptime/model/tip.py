"""
Tip Calculation (Core)
======================
Pure functions turning a cost of service, a tip rate and a round-up flag into
a tip amount. Nothing in here knows about Qt.

Classes:
    TipRate: The three selectable tip percentages.
    InputError: User-input rejections, valued with the notice shown to the user.
    TipResult: Outcome of one calculation.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Optional

from tiptime.config import COST_CEILING


class TipRate(Enum):
    """Selectable tip percentages. The value is the button id used by the view."""
    FIFTEEN = 15
    EIGHTEEN = 18
    TWENTY = 20

    @property
    def multiplier(self) -> float:
        return _MULTIPLIERS[self]

    @property
    def percent(self) -> int:
        return self.value

    @classmethod
    def from_button_id(cls, button_id: int) -> TipRate:
        """Unknown ids (including -1, nothing checked) fall back to FIFTEEN."""
        try:
            return cls(button_id)
        except ValueError:
            return cls.FIFTEEN


# Exact decimal literals, no arithmetic on the percent
_MULTIPLIERS: dict[TipRate, float] = {
    TipRate.FIFTEEN: 0.15,
    TipRate.EIGHTEEN: 0.18,
    TipRate.TWENTY: 0.20,
}


# Plain ASCII decimals with an optional exponent. No underscores, no
# non-ASCII digits, no nan/inf.
_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


class InputError(StrEnum):
    """Rejected cost of service. The value is the user-facing notice."""
    MISSING_OR_ZERO_COST = "Please, insert a valid value"
    COST_TOO_HIGH = "Cost too high"


@dataclass(frozen=True)
class TipResult:
    tip: float
    error: Optional[InputError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def compute_tip(cost: float, rate: TipRate, round_up: bool) -> float:
    """
    Tip for an already validated cost.

    Args:
        cost: Finite, non-negative cost of service.
        rate: Selected tip rate.
        round_up: Round the tip up to the next whole currency unit.

    Raises:
        ValueError: If cost is not finite or negative.
    """
    if not math.isfinite(cost) or cost < 0:
        raise ValueError(f"Cost must be a finite non-negative number, got {cost!r}.")

    tip = cost * rate.multiplier
    if round_up:
        tip = float(math.ceil(tip))
    return tip


def parse_cost(text: Optional[str]) -> tuple[Optional[float], Optional[InputError]]:
    """
    Parse free text from the cost field. Never raises.

    Returns (cost, None) on success, (None, error) otherwise. The ceiling is
    inclusive: COST_CEILING itself is accepted.
    """
    if text is None:
        return None, InputError.MISSING_OR_ZERO_COST

    text = text.strip()
    if not _DECIMAL_RE.fullmatch(text):
        return None, InputError.MISSING_OR_ZERO_COST

    cost = float(text)

    if not math.isfinite(cost) or cost <= 0.0:
        return None, InputError.MISSING_OR_ZERO_COST
    if cost > COST_CEILING:
        return None, InputError.COST_TOO_HIGH
    return cost, None


def calculate_tip(cost_text: Optional[str], rate: TipRate, round_up: bool) -> TipResult:
    """Validate the cost text and compute the tip. Invalid input gives a tip of 0."""
    cost, error = parse_cost(cost_text)
    if error is not None:
        return TipResult(tip=0.0, error=error)
    return TipResult(tip=compute_tip(cost, rate, round_up))
