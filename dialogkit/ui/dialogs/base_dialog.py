import logging
from typing import Callable, Optional

from PyQt6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout
from PyQt6.QtCore import Qt

from dialogkit.core.lang_manager import _
from dialogkit.ui.common_widgets import StyledButton
from dialogkit.ui.styles import DialogStyles


class BaseDialog(QDialog):
    """
    Modal dialog that reports its end exactly once.

    Subclasses end the dialog through `_finish(accepted, *close_args)`;
    Esc and the window close button go through `handle_cancel()`.
    """

    def __init__(self, parent=None, title: str = "", on_close: Optional[Callable] = None):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)
        self.setStyleSheet(DialogStyles.BASE)
        self.logger = logging.getLogger(self.__class__.__name__)

        self.on_close = on_close
        self._closed = False

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(15)

    @property
    def is_closed(self) -> bool:
        return self._closed

    def _create_button_row(self, ok_text: str = None, cancel_text: str = None):
        """Right aligned Ok/Cancel row. Pass cancel_text='' to omit Cancel."""
        btn_layout = QHBoxLayout()
        btn_layout.setSpacing(10)
        btn_layout.addStretch()

        self.ok_btn = StyledButton(ok_text or _("OK"), style_type="Blue")
        self.ok_btn.setDefault(True)
        self.ok_btn.clicked.connect(self.handle_ok)
        btn_layout.addWidget(self.ok_btn)

        self.cancel_btn = None
        if cancel_text != '':
            self.cancel_btn = StyledButton(cancel_text or _("Cancel"), style_type="Gray")
            self.cancel_btn.clicked.connect(self.handle_cancel)
            btn_layout.addWidget(self.cancel_btn)
        return btn_layout

    def _finish(self, accepted: bool, *close_args):
        if self._closed:
            return
        self._closed = True
        if self.on_close:
            self.on_close(*close_args)
        if accepted:
            super().accept()
        else:
            super().reject()

    def handle_ok(self):
        self._finish(True)

    def handle_cancel(self):
        self._finish(False)

    def accept(self):
        self.handle_ok()

    def reject(self):
        # Esc key and window close button
        self.handle_cancel()

    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Escape:
            self.handle_cancel()
            return
        super().keyPressEvent(event)
