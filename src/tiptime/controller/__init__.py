from tiptime.controller.calculator import TipController

__all__ = ["TipController"]
