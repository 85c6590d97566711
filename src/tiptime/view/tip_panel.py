"""
Tip Form Panel
"""
from __future__ import annotations

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QLineEdit, QGroupBox, QRadioButton, QButtonGroup, QCheckBox, QPushButton
)

from tiptime.model.state import TipFormState
from tiptime.model.tip import TipRate
from tiptime.view.formatting import tip_amount_text

# Ordered as shown, top to bottom
RATE_LABELS = {
    TipRate.TWENTY: "Amazing (20%)",
    TipRate.EIGHTEEN: "Good (18%)",
    TipRate.FIFTEEN: "OK (15%)",
}


class TipPanel(QWidget):
    """
    Cost field, tip options, round-up toggle, calculate button and the result.

    The panel does no arithmetic: it emits `calculate_requested` and shows
    whatever value it is given through `display_tip`.
    """
    calculate_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)

        # --- Cost of service ---
        self.cost_edit = QLineEdit()
        self.cost_edit.setPlaceholderText(self.tr("Cost of Service"))
        self.cost_edit.setInputMethodHints(Qt.InputMethodHint.ImhFormattedNumbersOnly)
        self.cost_edit.returnPressed.connect(self.on_return_pressed)
        layout.addWidget(self.cost_edit)

        # --- Tip options ---
        grp = QGroupBox(self.tr("How was the service?"))
        grp_layout = QVBoxLayout(grp)
        self.tip_options = QButtonGroup(self)
        self.tip_options.setExclusive(True)
        self.rate_buttons: dict[TipRate, QRadioButton] = {}
        for rate, label in RATE_LABELS.items():
            btn = QRadioButton(self.tr(label))
            self.tip_options.addButton(btn, rate.value)
            self.rate_buttons[rate] = btn
            grp_layout.addWidget(btn)
        layout.addWidget(grp)

        # --- Round up ---
        self.round_up_switch = QCheckBox(self.tr("Round up tip?"))
        layout.addWidget(self.round_up_switch)

        # --- Actions ---
        self.calculate_button = QPushButton(self.tr("Calculate"))
        self.calculate_button.setMinimumHeight(40)
        self.calculate_button.clicked.connect(self.on_calculate_clicked)
        layout.addWidget(self.calculate_button)

        # --- Result ---
        self.tip_result = QLabel()
        self.tip_result.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.tip_result.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self.tip_result)

        layout.addStretch()

        self.reset()

    def reset(self) -> None:
        """Back to defaults: empty cost, OK (15%), no rounding, zero tip."""
        defaults = TipFormState()
        self.cost_edit.clear()
        self.rate_buttons[defaults.rate].setChecked(True)
        self.round_up_switch.setChecked(defaults.round_up)
        self.display_tip(0.0)

    def form_state(self) -> TipFormState:
        state = TipFormState(
            cost_text=self.cost_edit.text(),
            round_up=self.round_up_switch.isChecked(),
        )
        state.set_rate_from_button_id(self.tip_options.checkedId())
        return state

    @Slot(float)
    def display_tip(self, tip: float) -> None:
        self.tip_result.setText(tip_amount_text(tip))

    @property
    def result_text(self) -> str:
        return self.tip_result.text()

    @Slot()
    def on_calculate_clicked(self) -> None:
        self.calculate_requested.emit()

    @Slot()
    def on_return_pressed(self) -> None:
        # Dismiss the virtual keyboard, then calculate like the button does
        input_method = QGuiApplication.inputMethod()
        if input_method is not None:
            input_method.hide()
        self.cost_edit.clearFocus()
        self.calculate_requested.emit()
