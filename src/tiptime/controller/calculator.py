"""
Tip Controller
==============
Bridges the form state and the view.

Why is this file needed?
------------------------
1. The view only collects widget values and displays results.
2. Rejections are turned into Qt signals here, so the window decides how to
   show a notice (status bar) while the model stays free of UI concerns.
"""
import logging

from PySide6.QtCore import QObject, Signal

from tiptime.model.state import TipFormState
from tiptime.model.tip import TipResult

logger = logging.getLogger(__name__)


class TipController(QObject):
    # Tip to display, 0.0 when the input was rejected
    tip_calculated = Signal(float)
    # One-shot user notice, e.g. "Cost too high"
    notice = Signal(str)

    def calculate(self, state: TipFormState) -> TipResult:
        result = state.calculate()

        if result.ok:
            logger.info(
                f"Tip {result.tip:.2f} for cost '{state.cost_text}' "
                f"at {state.rate.percent}% (round up: {state.round_up})"
            )
        else:
            logger.warning(f"Rejected cost '{state.cost_text}': {result.error.name}")
            self.notice.emit(str(result.error))

        self.tip_calculated.emit(result.tip)
        return result
