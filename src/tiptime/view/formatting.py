"""
Currency formatting for the result label. Delegates to QLocale.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QLocale

TIP_AMOUNT_TEMPLATE = "Tip Amount: {}"


def format_currency(value: float, locale: Optional[QLocale] = None) -> str:
    """Format `value` as currency using `locale` (default: system locale)."""
    if locale is None:
        locale = QLocale()
    return locale.toCurrencyString(value)


def tip_amount_text(value: float, locale: Optional[QLocale] = None) -> str:
    return TIP_AMOUNT_TEMPLATE.format(format_currency(value, locale))
