"""
Control Panel
=============
Left-hand side of the window: the five numeric inputs with their confirm
buttons, the reset button and the five read-only outputs.

The panel holds no logic. It emits a request signal per button and mirrors a
`FormState` onto its widgets in `load_from_state()`.
"""
from __future__ import annotations

from PySide6.QtCore import Signal, Qt
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QFormLayout, QLineEdit, QPushButton, QLabel,
)

from complexplane.model.state import Action, Field, FormState, Output

INPUT_LABELS = {
    Field.REAL: "实部 a:",
    Field.IMAG: "虚部 b:",
    Field.ANGLE: "旋转角度 (°):",
    Field.MULTIPLIER_REAL: "乘数实部 c:",
    Field.MULTIPLIER_IMAG: "乘数虚部 d:",
}

BUTTON_LABELS = {
    Action.CONFIRM_COMPLEX: "确定复数",
    Action.CONFIRM_ROTATE: "确定旋转",
    Action.CONFIRM_MULTIPLY: "乘以复数",
}

OUTPUT_LABELS = {
    Output.INITIAL: "初始复数 z:",
    Output.ROTATION_ANGLE: "旋转角度:",
    Output.ROTATED: "旋转后 z':",
    Output.MULTIPLIER: "乘数 w:",
    Output.PRODUCT: "乘积 z*w:",
}


class ControlPanel(QWidget):
    confirm_requested = Signal()
    rotate_requested = Signal()
    multiply_requested = Signal()
    reset_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        self.inputs: dict[Field, QLineEdit] = {}
        self.buttons: dict[Action, QPushButton] = {}
        self.outputs: dict[Output, QLabel] = {}

        layout = QVBoxLayout(self)

        # --- Input Groups ---
        layout.addWidget(self._input_group(
            "复数 z = a + bi", (Field.REAL, Field.IMAG), Action.CONFIRM_COMPLEX, self.confirm_requested
        ))
        layout.addWidget(self._input_group(
            "旋转", (Field.ANGLE,), Action.CONFIRM_ROTATE, self.rotate_requested
        ))
        layout.addWidget(self._input_group(
            "乘法 w = c + di", (Field.MULTIPLIER_REAL, Field.MULTIPLIER_IMAG),
            Action.CONFIRM_MULTIPLY, self.multiply_requested
        ))

        self.btn_reset = QPushButton("重置全部")
        self.btn_reset.setMinimumHeight(32)
        self.btn_reset.clicked.connect(self.reset_requested)
        layout.addWidget(self.btn_reset)

        # --- Outputs ---
        grp = QGroupBox("结果")
        form = QFormLayout(grp)
        for key, label in OUTPUT_LABELS.items():
            lbl = QLabel("")
            lbl.setTextInteractionFlags(Qt.TextSelectableByMouse)
            self.outputs[key] = lbl
            form.addRow(label, lbl)
        layout.addWidget(grp)

        layout.addStretch()

    def _input_group(self, title: str, fields: tuple[Field, ...], action: Action,
                     requested: Signal) -> QGroupBox:
        grp = QGroupBox(title)
        form = QFormLayout(grp)
        for key in fields:
            edit = QLineEdit()
            # Enter in any field of the group acts as its confirm button
            edit.returnPressed.connect(requested)
            self.inputs[key] = edit
            form.addRow(INPUT_LABELS[key], edit)
        btn = QPushButton(BUTTON_LABELS[action])
        btn.clicked.connect(requested)
        self.buttons[action] = btn
        form.addRow(btn)
        return grp

    # --- STATE SYNC ---

    def input_texts(self) -> dict[Field, str]:
        return {key: edit.text() for key, edit in self.inputs.items()}

    def load_from_state(self, form: FormState) -> None:
        """Syncs widgets from the given FormState."""
        for key, edit in self.inputs.items():
            edit.blockSignals(True)
            if edit.text() != form.inputs[key]:
                edit.setText(form.inputs[key])
            edit.setEnabled(form.enabled[key])
            edit.blockSignals(False)

        for key, btn in self.buttons.items():
            btn.setEnabled(form.enabled[key])

        for key, lbl in self.outputs.items():
            lbl.setText(form.outputs[key])

        if form.focus is not None:
            self.inputs[form.focus].setFocus()
