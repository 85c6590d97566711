"""
Main Application Window
=======================
The single screen of the application: the tip form plus a status bar.

Why is this file needed?
------------------------
1. Layout: It hosts the form panel.
2. Routing: It connects the panel's calculate action to the controller and
   the controller's results back to the panel and the status bar.
"""
import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QStatusBar
from PySide6.QtCore import Slot

from tiptime.app.application import VISIBLE_APP_NAME
from tiptime.config import NOTICE_TIMEOUT_MS
from tiptime.controller.calculator import TipController
from tiptime.model.tip import TipResult
from tiptime.view.tip_panel import TipPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, controller: Optional[TipController] = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(360, 420)

        self.controller = controller or TipController(self)

        self.panel = TipPanel()
        self.setCentralWidget(self.panel)

        self.setStatusBar(QStatusBar())

        # --- SIGNAL CONNECTIONS ---
        self.panel.calculate_requested.connect(self.on_calculate)
        self.controller.tip_calculated.connect(self.panel.display_tip)
        self.controller.notice.connect(self.show_notice)

    @Slot()
    def on_calculate(self) -> TipResult:
        return self.controller.calculate(self.panel.form_state())

    @Slot(str)
    def show_notice(self, message: str) -> None:
        """Transient message, the desktop stand-in for a short toast."""
        self.statusBar().showMessage(message, NOTICE_TIMEOUT_MS)
