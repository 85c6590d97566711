"""
Form State (Data Model)
=======================
This module defines the values one calculation reads from the screen.

Why is this file needed?
------------------------
1. Decoupling: The view fills this object from its widgets; the controller
   reads it. Neither needs to know about the other's internals.
2. Testability: A calculation can be driven without any widget at all.

Classes:
    TipFormState: Cost text, selected rate and round-up flag.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging

from tiptime.config import DEFAULT_RATE_NAME
from tiptime.model.tip import TipRate, TipResult, calculate_tip

logger = logging.getLogger(__name__)


def _default_rate() -> TipRate:
    return TipRate[DEFAULT_RATE_NAME]


@dataclass
class TipFormState:
    """
    Snapshot of the form. Transient: rebuilt on every calculate action and
    never saved.
    """
    cost_text: str = ""
    rate: TipRate = field(default_factory=_default_rate)
    round_up: bool = False

    def set_rate_from_button_id(self, button_id: int) -> None:
        self.rate = TipRate.from_button_id(button_id)

    def calculate(self) -> TipResult:
        logger.debug(f"Calculating tip for {self}")
        return calculate_tip(self.cost_text, self.rate, self.round_up)
