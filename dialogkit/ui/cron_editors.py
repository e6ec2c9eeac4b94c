"""
Schedule editors shown inside the cron dialogs.

Every editor takes the held schedule text with `set_value()` and reports
edits through `changed(str)`. Loading a value never emits `changed`, so
switching editors does not rewrite the held schedule.
"""

import json
import logging

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel,
    QCheckBox, QPlainTextEdit
)
from PyQt6.QtCore import pyqtSignal

from dialogkit.core.lang_manager import _
from dialogkit.core.cron_text import DAY_NAMES
from dialogkit.core.schedule import DEFAULT_WIZARD
from dialogkit.core.simple_cron import (
    SimpleCronState, cron_to_state, state_to_cron,
    MODE_INTERVAL, MODE_INTERVAL_BETWEEN, MODE_SPECIFIC, UNITS
)
from dialogkit.ui.common_widgets import StyledLineEdit, StyledComboBox, StyledSpinBox
from dialogkit.ui.styles import DialogStyles


def _parse_number_list(text: str, low: int, high: int):
    """'8, 12,18' -> (8, 12, 18); None when a token is not a number in range."""
    values = []
    for token in text.replace(' ', '').split(','):
        if not token:
            continue
        if not token.isdigit() or not low <= int(token) <= high:
            return None
        if int(token) not in values:
            values.append(int(token))
    return tuple(sorted(values)) or None


class ComplexCronEditor(QWidget):
    """Raw cron line (5 or 6 fields)."""
    changed = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(QLabel(_("Cron expression (second minute hour day month weekday):")))
        self.line_edit = StyledLineEdit()
        self.line_edit.setPlaceholderText("* * * * *")
        self.line_edit.textEdited.connect(self.changed.emit)
        layout.addWidget(self.line_edit)
        layout.addStretch()

    def set_value(self, value: str):
        # Wizard objects are not shown as cron text
        self.line_edit.setText('' if value.startswith('{') else value)

    def value(self) -> str:
        return self.line_edit.text().strip()


class WizardEditor(QWidget):
    """JSON text of a wizard schedule object."""
    changed = pyqtSignal(str)
    validity_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.valid = True
        self._loading = False
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(QLabel(_("Schedule (JSON):")))
        self.text_edit = QPlainTextEdit()
        self.text_edit.textChanged.connect(self._on_text_changed)
        layout.addWidget(self.text_edit)
        self.error_lbl = QLabel(_("Invalid JSON"))
        self.error_lbl.setStyleSheet(DialogStyles.ERROR_LABEL)
        self.error_lbl.setVisible(False)
        layout.addWidget(self.error_lbl)

    def set_value(self, value: str):
        self._loading = True
        self.text_edit.setPlainText(value if value.startswith('{') else DEFAULT_WIZARD)
        self._loading = False
        self._validate()

    def value(self) -> str:
        return self.text_edit.toPlainText().strip()

    def _validate(self) -> bool:
        try:
            self.valid = isinstance(json.loads(self.value() or DEFAULT_WIZARD), dict)
        except ValueError:
            self.valid = False
        self.error_lbl.setVisible(not self.valid)
        self.validity_changed.emit(self.valid)
        return self.valid

    def _on_text_changed(self):
        if self._loading:
            return
        if self._validate():
            self.changed.emit(self.value() or DEFAULT_WIZARD)


class SimpleCronEditor(QWidget):
    """Builder for interval, interval-between-hours and fixed-time schedules."""
    changed = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.logger = logging.getLogger("SimpleCronEditor")
        self.state = SimpleCronState(MODE_INTERVAL)
        self._loading = False
        self._init_ui()
        self._load_state(self.state)

    def _init_ui(self):
        layout = QGridLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.mode_combo = StyledComboBox()
        self.mode_combo.addItem(_("Every"), MODE_INTERVAL)
        self.mode_combo.addItem(_("Every, between hours"), MODE_INTERVAL_BETWEEN)
        self.mode_combo.addItem(_("At specific times"), MODE_SPECIFIC)
        layout.addWidget(QLabel(_("Mode:")), 0, 0)
        layout.addWidget(self.mode_combo, 0, 1, 1, 3)

        self.period_spin = StyledSpinBox(minimum=1, maximum=59)
        self.unit_combo = StyledComboBox()
        for unit in UNITS:
            self.unit_combo.addItem(_(unit), unit)
        layout.addWidget(QLabel(_("Period:")), 1, 0)
        layout.addWidget(self.period_spin, 1, 1)
        layout.addWidget(self.unit_combo, 1, 2)

        self.hour_from_spin = StyledSpinBox(minimum=0, maximum=23)
        self.hour_to_spin = StyledSpinBox(minimum=0, maximum=23)
        layout.addWidget(QLabel(_("Hours:")), 2, 0)
        layout.addWidget(self.hour_from_spin, 2, 1)
        layout.addWidget(self.hour_to_spin, 2, 2)

        self.hours_edit = StyledLineEdit()
        self.hours_edit.setPlaceholderText("8,12,18")
        self.minutes_edit = StyledLineEdit()
        self.minutes_edit.setPlaceholderText("0,30")
        layout.addWidget(QLabel(_("At hours / minutes:")), 3, 0)
        layout.addWidget(self.hours_edit, 3, 1)
        layout.addWidget(self.minutes_edit, 3, 2)

        weekday_layout = QHBoxLayout()
        self.weekday_checks = []
        for day, name in enumerate(DAY_NAMES):
            chk = QCheckBox(_(name[:3]))
            chk.setProperty("weekday", day)
            chk.toggled.connect(self._on_edited)
            self.weekday_checks.append(chk)
            weekday_layout.addWidget(chk)
        layout.addWidget(QLabel(_("Weekdays:")), 4, 0)
        layout.addLayout(weekday_layout, 4, 1, 1, 3)
        layout.setRowStretch(5, 1)

        self.mode_combo.currentIndexChanged.connect(self._on_edited)
        self.unit_combo.currentIndexChanged.connect(self._on_edited)
        self.period_spin.valueChanged.connect(self._on_edited)
        self.hour_from_spin.valueChanged.connect(self._on_edited)
        self.hour_to_spin.valueChanged.connect(self._on_edited)
        self.hours_edit.textEdited.connect(self._on_edited)
        self.minutes_edit.textEdited.connect(self._on_edited)

    def set_value(self, value: str):
        state = cron_to_state(value)
        if state is None:
            self.logger.debug(f"'{value}' cannot be shown in the simple editor, using defaults")
            state = SimpleCronState(MODE_INTERVAL)
        self._load_state(state)

    def value(self) -> str:
        return state_to_cron(self.state)

    def _load_state(self, state: SimpleCronState):
        self._loading = True
        self.state = state
        self.mode_combo.set_current_data(state.mode)
        self.unit_combo.set_current_data(state.unit)
        self.period_spin.setValue(state.period)
        self.hour_from_spin.setValue(state.hour_from)
        self.hour_to_spin.setValue(state.hour_to)
        self.hours_edit.setText(','.join(str(h) for h in state.hours))
        self.minutes_edit.setText(','.join(str(m) for m in state.minutes))
        for chk in self.weekday_checks:
            chk.setChecked(chk.property("weekday") in state.weekdays)
        self._loading = False
        self._update_visibility()

    def _update_visibility(self):
        mode = self.mode_combo.currentData()
        specific = mode == MODE_SPECIFIC
        self.period_spin.setEnabled(not specific)
        self.unit_combo.setEnabled(not specific)
        self.hour_from_spin.setEnabled(mode == MODE_INTERVAL_BETWEEN)
        self.hour_to_spin.setEnabled(mode == MODE_INTERVAL_BETWEEN)
        self.hours_edit.setEnabled(specific)
        self.minutes_edit.setEnabled(specific)

    def _read_state(self):
        """State from the widgets; None while a field holds an invalid value."""
        mode = self.mode_combo.currentData()
        unit = self.unit_combo.currentData()
        if mode == MODE_INTERVAL_BETWEEN and unit == "hours":
            unit = "minutes"
        hour_from, hour_to = self.hour_from_spin.value(), self.hour_to_spin.value()
        if hour_from > hour_to:
            return None
        hours = self.state.hours
        minutes = self.state.minutes
        if mode == MODE_SPECIFIC:
            hours = _parse_number_list(self.hours_edit.text(), 0, 23)
            minutes = _parse_number_list(self.minutes_edit.text(), 0, 59)
            if hours is None or minutes is None:
                return None
        weekdays = tuple(chk.property("weekday") for chk in self.weekday_checks if chk.isChecked())
        if len(weekdays) == len(self.weekday_checks):
            weekdays = ()
        return SimpleCronState(
            mode=mode,
            period=self.period_spin.value(),
            unit=unit,
            hour_from=hour_from,
            hour_to=hour_to,
            seconds=self.state.seconds,
            minutes=minutes,
            hours=hours,
            weekdays=weekdays,
            with_seconds=mode == MODE_SPECIFIC and self.state.with_seconds,
        )

    def _on_edited(self, *args):
        if self._loading:
            return
        self._update_visibility()
        state = self._read_state()
        if state is None:
            return
        self.state = state
        self.changed.emit(self.value())
