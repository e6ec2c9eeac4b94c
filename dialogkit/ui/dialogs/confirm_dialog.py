"""
Confirmation dialog with an optional "don't ask again" checkbox.

Usage:
    dlg = ConfirmDialog(text=_("Delete the object?"),
                        suppress_question_minutes=5, dialog_name="deleteObject",
                        store=store, on_close=lambda ok: ok and delete())
    dlg.exec()

When the user ticked the checkbox earlier and the window has not expired,
the dialog never shows up: it confirms itself after SUPPRESSED_CONFIRM_DELAY_MS.
"""

from typing import Callable, Optional

from PyQt6.QtWidgets import QLabel, QCheckBox, QHBoxLayout
from PyQt6.QtCore import Qt, QTimer, QEventLoop

from dialogkit.core.errors import MissingCollaboratorError
from dialogkit.core.lang_manager import _
from dialogkit.core.settings_store import SettingsStore
from dialogkit.core.suppression import SuppressionGate
from dialogkit.ui.dialogs.base_dialog import BaseDialog
from dialogkit.ui.styles import DialogStyles

SUPPRESSED_CONFIRM_DELAY_MS = 100


class ConfirmDialog(BaseDialog):
    """Ok/Cancel question. on_close(True) on Ok, on_close(False) otherwise.

    A suppressed dialog stays referenced by the class until its deferred
    confirmation ran, so callers need not keep it around.
    """
    # suppressed dialogs waiting for their deferred Ok
    _pending = set()

    def __init__(self, parent=None, title: str = None, text: str = "",
                 ok_text: str = None, cancel_text: str = None,
                 suppress_question_minutes: float = None, suppress_text: str = None,
                 dialog_name: str = None, store: SettingsStore = None,
                 on_close: Optional[Callable[[bool], None]] = None, clock=None):
        super().__init__(parent, title or _("Are you sure?"), on_close)

        self.dialog_name = dialog_name
        self.suppress_question_minutes = suppress_question_minutes
        self.gate = None
        self.suppressed = False
        self.suppress_chk = None

        if suppress_question_minutes:
            if not dialog_name:
                raise MissingCollaboratorError("dialog_name is required if suppress_question_minutes is used")
            self.gate = SuppressionGate(store, clock)
            self.suppressed = self.gate.is_suppressed(dialog_name)

        if self.suppressed:
            self.logger.info(f"Confirmation '{dialog_name}' is suppressed, confirming automatically")
            ConfirmDialog._pending.add(self)
            QTimer.singleShot(SUPPRESSED_CONFIRM_DELAY_MS, self.handle_ok)
            return

        self._init_ui(text, ok_text, cancel_text, suppress_text)

    def _init_ui(self, text, ok_text, cancel_text, suppress_text):
        self.text_lbl = QLabel(text)
        self.text_lbl.setWordWrap(True)
        self.text_lbl.setStyleSheet(DialogStyles.MESSAGE_TEXT)
        self.main_layout.addWidget(self.text_lbl)

        if self.suppress_question_minutes:
            minutes = self.suppress_question_minutes
            label = suppress_text or _("Suppress question for next {minutes} minutes").format(minutes=minutes)
            suppress_layout = QHBoxLayout()
            self.suppress_chk = QCheckBox(label)
            suppress_layout.addWidget(self.suppress_chk)
            suppress_layout.addStretch()
            self.main_layout.addLayout(suppress_layout)

        self.main_layout.addLayout(self._create_button_row(ok_text, cancel_text))
        self.ok_btn.setFocus()

    def handle_ok(self):
        if self.is_closed:
            return
        if self.suppress_chk is not None and self.suppress_chk.isChecked():
            self.gate.suppress_for(self.dialog_name, self.suppress_question_minutes)
        self._finish(True, True)
        ConfirmDialog._pending.discard(self)

    def handle_cancel(self):
        self._finish(False, False)
        ConfirmDialog._pending.discard(self)

    def keyPressEvent(self, event):
        # Esc does not answer the question
        if event.key() == Qt.Key.Key_Escape:
            event.ignore()
            return
        super().keyPressEvent(event)

    def setVisible(self, visible: bool):
        if visible and self.suppressed:
            return
        super().setVisible(visible)

    def exec(self) -> int:
        if not self.suppressed:
            return super().exec()
        # Nothing to show: wait for the deferred confirmation
        if not self.is_closed:
            loop = QEventLoop()
            self.finished.connect(loop.quit)
            loop.exec()
        return self.result()
