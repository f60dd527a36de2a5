"""
Main Application Window
=======================
The primary GUI container: control panel on the left, complex plane on the
right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the panel's buttons to the session controller and
   turns validation errors into alert dialogs.
"""
import logging
from typing import Callable

from PySide6.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QMessageBox
from PySide6.QtCore import Qt

from complexplane.config import VISIBLE_APP_NAME
from complexplane.controller.session import SessionController
from complexplane.model.errors import InvalidNumericInput
from complexplane.model.state import Field, FormState, SessionState
from complexplane.view.control_panel import ControlPanel
from complexplane.view.renderer import PlaneRenderer
from complexplane.view.widgets.plane_canvas import PlaneCanvas

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, session: SessionState, form: FormState) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QHBoxLayout(main_widget)

        # --- LEFT SIDE: Controls ---
        self.panel = ControlPanel()
        self.panel.setFixedWidth(280)
        main_layout.addWidget(self.panel)

        # --- RIGHT SIDE: Complex plane ---
        self.canvas = PlaneCanvas()
        main_layout.addWidget(self.canvas, 1, Qt.AlignCenter)

        self.controller = SessionController(session, form, PlaneRenderer(self.canvas.surface))

        # --- SIGNAL CONNECTIONS ---
        self.panel.confirm_requested.connect(self.on_confirm)
        self.panel.rotate_requested.connect(self.on_rotate)
        self.panel.multiply_requested.connect(self.on_multiply)
        self.panel.reset_requested.connect(self.on_reset)

        # Initial setup: default inputs and bare axes
        self.on_reset()

    # --- SLOTS ---

    def on_confirm(self) -> None:
        texts = self._push_inputs()
        self._run(lambda: self.controller.confirm(texts[Field.REAL], texts[Field.IMAG]))

    def on_rotate(self) -> None:
        texts = self._push_inputs()
        self._run(lambda: self.controller.rotate(texts[Field.ANGLE]))

    def on_multiply(self) -> None:
        texts = self._push_inputs()
        self._run(lambda: self.controller.multiply(
            texts[Field.MULTIPLIER_REAL], texts[Field.MULTIPLIER_IMAG]
        ))

    def on_reset(self) -> None:
        self._run(self.controller.reset)

    # --- HELPERS ---

    def _push_inputs(self) -> dict[Field, str]:
        """Copy what the user typed into the form state before an action reads it."""
        texts = self.panel.input_texts()
        self.controller.form.inputs.update(texts)
        return texts

    def _run(self, action: Callable[[], object]) -> None:
        try:
            action()
        except InvalidNumericInput as e:
            logger.warning(f"Action aborted: {e.message}")
            QMessageBox.warning(self, "输入错误", e.message)
            return

        self.panel.load_from_state(self.controller.form)
        self.canvas.update()
