from tiptime.model.tip import TipRate, InputError, TipResult, compute_tip, parse_cost, calculate_tip
from tiptime.model.state import TipFormState

__all__ = [
    "TipRate",
    "InputError",
    "TipResult",
    "TipFormState",
    "compute_tip",
    "parse_cost",
    "calculate_tip",
]
