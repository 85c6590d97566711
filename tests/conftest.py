"""
Pytest configuration and shared fixtures.

Qt widgets are created against the offscreen platform so the suite runs
without a display.
"""
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QLocale  # noqa: E402

from tiptime.app.application import create_app  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole session."""
    QLocale.setDefault(QLocale(QLocale.Language.English, QLocale.Country.UnitedStates))
    return create_app(["tiptime-tests"])
