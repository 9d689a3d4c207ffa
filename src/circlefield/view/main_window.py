"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the field view and the Status Bar.

Why is this file needed?
------------------------
1. Layout: It hosts the QGraphicsView showing the FieldScene.
2. Routing: It connects menu actions (Reseed, Clear) to the FieldController
   and reports failures (e.g. a saturated field) in the status bar.
"""
import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence, QPainter
from PySide6.QtWidgets import QGraphicsView, QLabel, QMainWindow

from circlefield.controller.field_controller import FieldController
from circlefield.model.exceptions import PlacementExhausted
from circlefield.view.widgets.field_scene import FieldScene

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Circle Field"
STATUS_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    def __init__(self, controller: FieldController) -> None:
        super().__init__()
        self.controller = controller
        self.setWindowTitle(VISIBLE_APP_NAME)

        # --- FIELD ---
        self.scene = FieldScene(controller, parent=self)
        self.view = QGraphicsView(self.scene)
        self.view.setRenderHint(QPainter.Antialiasing)
        self.view.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.view.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.view.setFixedSize(int(controller.config.width) + 4, int(controller.config.height) + 4)
        self.setCentralWidget(self.view)

        # --- MENU ---
        self._create_actions()

        # --- STATUS BAR ---
        self.count_label = QLabel()
        self.statusBar().addPermanentWidget(self.count_label)
        self.scene.count_changed.connect(self.update_count)
        self.update_count(len(controller.field))

        self.adjustSize()

    def _create_actions(self) -> None:
        menu = self.menuBar().addMenu("&Field")

        act_reseed = QAction("&Reseed", self)
        act_reseed.setShortcut(QKeySequence("Ctrl+R"))
        act_reseed.triggered.connect(self.reseed)
        menu.addAction(act_reseed)

        act_clear = QAction("&Clear", self)
        act_clear.setShortcut(QKeySequence("Ctrl+L"))
        act_clear.triggered.connect(self.controller.clear)
        menu.addAction(act_clear)

        menu.addSeparator()

        act_quit = QAction("&Quit", self)
        act_quit.setShortcut(QKeySequence.Quit)
        act_quit.triggered.connect(self.close)
        menu.addAction(act_quit)

    def reseed(self) -> None:
        try:
            self.controller.seed()
        except PlacementExhausted as e:
            logger.error(f"Reseeding failed: {e}")
            self.statusBar().showMessage(f"Field is full: {e}", STATUS_TIMEOUT_MS)

    def update_count(self, count: int) -> None:
        self.count_label.setText(f"Circles: {count}")
