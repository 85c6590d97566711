"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) pieces and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging from the configuration.
2. Creates the QApplication.
3. Instantiates the controller and the Main Window (View) and connects them.
"""
import logging

from tiptime.app.application import create_app
from tiptime.config import LOG_LEVEL, LOG_FILE
from tiptime.controller.calculator import TipController
from tiptime.logging_config import setup_logging
from tiptime.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Main Window with its controller
    controller = TipController()
    window = MainWindow(controller)
    window.show()

    # 4. Start Event Loop
    logger.info("Starting event loop.")
    return app.exec()
