from typing import Callable, Optional

from PyQt6.QtWidgets import QLabel, QLineEdit

from dialogkit.core.lang_manager import _
from dialogkit.ui.common_widgets import StyledLineEdit
from dialogkit.ui.dialogs.base_dialog import BaseDialog
from dialogkit.ui.styles import DialogStyles


class TextInputDialog(BaseDialog):
    """
    Single line text prompt.

    verify(text) -> bool marks the input invalid, rule(text) -> str rewrites
    it while typing. on_close(text) on Ok or Enter, on_close(None) otherwise.
    """

    ECHO_MODES = {
        "text": QLineEdit.EchoMode.Normal,
        "password": QLineEdit.EchoMode.Password,
    }

    def __init__(self, parent=None, title: str = "", prompt_text: str = "", label_text: str = "",
                 input_text: str = "", apply_text: str = None, cancel_text: str = None,
                 verify: Optional[Callable[[str], bool]] = None,
                 rule: Optional[Callable[[str], str]] = None,
                 input_type: str = "text",
                 on_close: Optional[Callable[[Optional[str]], None]] = None):
        super().__init__(parent, title, on_close)
        self.resize(350, 180)
        self.verify = verify
        self.rule = rule
        self.error = False

        if prompt_text:
            prompt = QLabel(prompt_text)
            prompt.setWordWrap(True)
            self.main_layout.addWidget(prompt)

        self.input_field = StyledLineEdit()
        self.input_field.setPlaceholderText(label_text)
        self.input_field.setEchoMode(self.ECHO_MODES.get(input_type, QLineEdit.EchoMode.Normal))
        self.input_field.setMinimumHeight(35)
        self.main_layout.addWidget(self.input_field)

        self.error_lbl = QLabel(_("Invalid value"))
        self.error_lbl.setStyleSheet(DialogStyles.ERROR_LABEL)
        self.error_lbl.setVisible(False)
        self.main_layout.addWidget(self.error_lbl)

        self.main_layout.addLayout(self._create_button_row(apply_text, cancel_text))

        self.input_field.textEdited.connect(self._on_text_edited)
        self.input_field.returnPressed.connect(self.handle_ok)
        self.input_field.setText(input_text or "")
        self._update_state()

    @property
    def text(self) -> str:
        return self.input_field.text()

    def set_text(self, text: str):
        """Same path as typing: rule rewrite and verification."""
        self.input_field.setText(text)
        self._on_text_edited(text)

    def _on_text_edited(self, text: str):
        self.error = bool(self.verify) and not self.verify(text)
        if self.rule:
            rewritten = self.rule(text)
            if rewritten != text:
                cursor = self.input_field.cursorPosition()
                self.input_field.setText(rewritten)
                self.input_field.setCursorPosition(min(cursor, len(rewritten)))
        self._update_state()

    def _update_state(self):
        self.error_lbl.setVisible(self.error)
        self.ok_btn.setEnabled(self.can_apply())

    def can_apply(self) -> bool:
        return bool(self.text) and not self.error

    def handle_ok(self):
        if not self.can_apply():
            return
        self._finish(True, self.text)

    def handle_cancel(self):
        self._finish(False, None)

    def showEvent(self, event):
        super().showEvent(event)
        self.input_field.setFocus()
        self.input_field.selectAll()
