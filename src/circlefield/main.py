"""
Application Initialization
==========================
This module constructs the Model-View-Controller objects and starts the Qt
Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses the command line and sets up logging.
2. Instantiates the session (FieldController) and seeds the field.
3. Passes the controller into the Main Window (View).
4. Prevents circular import errors by being the orchestrator.
"""
import argparse
import logging
import sys
from typing import List, Optional

from circlefield.config import FieldConfig
from circlefield.logging_config import setup_logging

logger = logging.getLogger(__name__)

ORG_ID = "circlefield"
APP_ID = "circle-field"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parses command-line arguments.

    Returns:
        Namespace with the RNG seed, initial circle count and logging options.
    """
    parser = argparse.ArgumentParser(prog="circlefield", description="Draggable, mergeable colored circles.")
    parser.add_argument("--seed", type=int, default=None, help="seed for placement and colors (reproducible runs).")
    parser.add_argument("--count", type=int, default=None, help="number of circles placed at start.")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level.")
    parser.add_argument("--log-file", type=str, default=None, help="also write the log to this file.")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> FieldConfig:
    return FieldConfig().with_overrides(seed=args.seed, seed_count=args.count)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # Qt is imported late so the CLI and config errors surface without a display
    from PySide6.QtCore import QCoreApplication
    from PySide6.QtWidgets import QApplication

    from circlefield.controller.field_controller import FieldController
    from circlefield.view.main_window import MainWindow, VISIBLE_APP_NAME

    # 2. Create the Qt Application
    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    app = QApplication(sys.argv[:1])
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    # 3. Initialize the session and seed the field
    controller = FieldController(build_config(args))

    # 4. Initialize the Main Window, passing the controller
    window = MainWindow(controller)
    window.reseed()
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
