"""
Schedule dialogs.

CronDialog lets the user switch between the wizard, the simple builder and
the raw cron line (depending on the simple/complex/no_wizard flags).
ComplexCronDialog and SimpleCronDialog show one editor only.

All of them emit the canonical schedule string through on_ok(value) and
then call on_close(). ComplexCronDialog's Clear button emits on_ok(False).
"""

from typing import Callable, Optional

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QRadioButton, QButtonGroup, QStackedWidget

from dialogkit.core.errors import CronParseError
from dialogkit.core.lang_manager import _
from dialogkit.core.cron_text import cron_to_text
from dialogkit.core.schedule import (
    EditorMode, ScheduleEditorState, ScheduleFlags, CronExpression
)
from dialogkit.ui.common_widgets import StyledButton
from dialogkit.ui.cron_editors import ComplexCronEditor, SimpleCronEditor, WizardEditor
from dialogkit.ui.dialogs.base_dialog import BaseDialog
from dialogkit.ui.styles import DialogStyles

MODE_LABELS = {
    EditorMode.WIZARD: "Wizard",
    EditorMode.SIMPLE: "Simple",
    EditorMode.COMPLEX: "Cron",
}


class CronDialog(BaseDialog):
    def __init__(self, parent=None, title: str = None, cron=None,
                 ok_text: str = None, cancel_text: str = None,
                 simple: bool = False, complex: bool = False, no_wizard: bool = False,
                 on_ok: Optional[Callable] = None, on_close: Optional[Callable[[], None]] = None,
                 classifier: Optional[Callable[[str], bool]] = None):
        super().__init__(parent, title or _("Define schedule..."), on_close)
        self.resize(560, 420)
        self.on_ok = on_ok

        self.state = ScheduleEditorState.open(
            cron, ScheduleFlags(simple=simple, complex=complex, no_wizard=no_wizard), classifier)

        self._init_mode_selector()
        self._init_editors()

        self.preview_lbl = QLabel()
        self.preview_lbl.setWordWrap(True)
        self.preview_lbl.setStyleSheet(DialogStyles.CRON_PREVIEW)
        self.main_layout.addWidget(self.preview_lbl)

        self.button_layout = self._create_button_row(ok_text, cancel_text)
        self.main_layout.addLayout(self.button_layout)

        self._show_editor(self.state.mode)

    def _init_mode_selector(self):
        self.mode_group = QButtonGroup(self)
        self.mode_radios = {}
        modes = self.state.modes
        # A single editor needs no selector
        if len(modes) < 2:
            return

        radio_layout = QHBoxLayout()
        for mode in modes:
            radio = QRadioButton(_(MODE_LABELS[mode]))
            radio.toggled.connect(lambda checked, m=mode: checked and self.set_mode(m))
            self.mode_group.addButton(radio)
            self.mode_radios[mode] = radio
            radio_layout.addWidget(radio)
        radio_layout.addStretch()
        self.main_layout.addLayout(radio_layout)

    def _init_editors(self):
        self.editors = {
            EditorMode.WIZARD: WizardEditor(),
            EditorMode.SIMPLE: SimpleCronEditor(),
            EditorMode.COMPLEX: ComplexCronEditor(),
        }
        self.stack = QStackedWidget()
        for editor in self.editors.values():
            editor.changed.connect(self._on_editor_changed)
            self.stack.addWidget(editor)
        self.editors[EditorMode.WIZARD].validity_changed.connect(self._on_validity_changed)
        self.main_layout.addWidget(self.stack, 1)

    @property
    def mode(self) -> EditorMode:
        return self.state.mode

    @property
    def value(self) -> str:
        return self.state.value

    def set_mode(self, mode: EditorMode):
        """Switches the visible editor; the held value is not touched."""
        if mode == self.state.mode:
            return
        self.state = self.state.switch_mode(mode)
        self.logger.debug(f"Switched to {mode.value} editor")
        self._show_editor(mode)

    def _show_editor(self, mode: EditorMode):
        radio = self.mode_radios.get(mode)
        if radio is not None and not radio.isChecked():
            radio.blockSignals(True)
            radio.setChecked(True)
            radio.blockSignals(False)
        editor = self.editors[mode]
        editor.set_value(self.state.value)
        self.stack.setCurrentWidget(editor)
        self._update_preview()

    def _on_editor_changed(self, text: str):
        if self.sender() is not self.editors[self.state.mode]:
            return
        self.state = self.state.set_value(text)
        self._update_preview()

    def _update_preview(self):
        schedule = self.state.schedule
        if not isinstance(schedule, CronExpression):
            self.preview_lbl.setText("")
            self._set_ok_enabled(self.editors[EditorMode.WIZARD].valid
                                 if self.state.mode == EditorMode.WIZARD else True)
            return
        try:
            self.preview_lbl.setText(cron_to_text(schedule.text))
            self._set_ok_enabled(True)
        except CronParseError as e:
            self.logger.debug(str(e))
            self.preview_lbl.setText(_("Invalid cron expression"))
            self._set_ok_enabled(False)

    def _set_ok_enabled(self, enabled: bool):
        self.ok_btn.setEnabled(enabled)

    def _on_validity_changed(self, valid: bool):
        if self.state.mode == EditorMode.WIZARD:
            self._set_ok_enabled(valid)

    def handle_ok(self):
        if self.is_closed:
            return
        if self.on_ok:
            self.on_ok(self.state.value)
        self._finish(True)


class ComplexCronDialog(CronDialog):
    """Raw cron line only, optionally with a Clear button."""

    def __init__(self, parent=None, title: str = None, cron=None,
                 ok_text: str = None, cancel_text: str = None,
                 clear_button: bool = False, clear_text: str = None,
                 on_ok: Optional[Callable] = None, on_close: Optional[Callable[[], None]] = None):
        super().__init__(parent, title, cron, ok_text, cancel_text, complex=True,
                         on_ok=on_ok, on_close=on_close)
        self.clear_btn = None
        if clear_button:
            self.clear_btn = StyledButton(clear_text or _("Clear"), style_type="Gray")
            self.clear_btn.clicked.connect(self.handle_clear)
            # Left of Ok, after the stretch
            self.button_layout.insertWidget(1, self.clear_btn)

    def handle_clear(self):
        """Explicit "no schedule"."""
        if self.is_closed:
            return
        if self.on_ok:
            self.on_ok(False)
        self._finish(True)


class SimpleCronDialog(CronDialog):
    """Simple builder only."""

    def __init__(self, parent=None, title: str = None, cron=None,
                 ok_text: str = None, cancel_text: str = None,
                 on_ok: Optional[Callable] = None, on_close: Optional[Callable[[], None]] = None):
        super().__init__(parent, title, cron, ok_text, cancel_text, simple=True,
                         on_ok=on_ok, on_close=on_close)
