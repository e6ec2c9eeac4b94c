from typing import Callable, Optional

from PyQt6.QtWidgets import QApplication, QHBoxLayout, QLabel, QStyle
from PyQt6.QtCore import Qt

from dialogkit.core.lang_manager import _
from dialogkit.ui.dialogs.base_dialog import BaseDialog
from dialogkit.ui.styles import DialogStyles


class MessageDialog(BaseDialog):
    """Text with a single button. on_close() however the dialog ends."""

    class Icon:
        NoIcon = 0
        Information = 1
        Warning = 2
        Critical = 3

    _PIXMAPS = {
        Icon.Information: QStyle.StandardPixmap.SP_MessageBoxInformation,
        Icon.Warning: QStyle.StandardPixmap.SP_MessageBoxWarning,
        Icon.Critical: QStyle.StandardPixmap.SP_MessageBoxCritical,
    }

    def __init__(self, parent=None, title: str = None, text: str = "",
                 ok_text: str = None, icon: int = Icon.NoIcon,
                 on_close: Optional[Callable[[], None]] = None):
        super().__init__(parent, title or _("Message"), on_close)
        self.resize(400, 160)

        msg_layout = QHBoxLayout()
        msg_layout.setSpacing(15)

        self.icon_lbl = QLabel()
        self.icon_lbl.setFixedSize(48, 48)
        self.icon_lbl.setVisible(False)
        msg_layout.addWidget(self.icon_lbl, 0, Qt.AlignmentFlag.AlignTop)
        self.setIcon(icon)

        self.text_lbl = QLabel(text)
        self.text_lbl.setWordWrap(True)
        self.text_lbl.setStyleSheet(DialogStyles.MESSAGE_TEXT)
        self.text_lbl.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        msg_layout.addWidget(self.text_lbl, 1)
        self.main_layout.addLayout(msg_layout)

        self.main_layout.addLayout(self._create_button_row(ok_text or _("Close"), cancel_text=''))
        self.ok_btn.setFocus()

    def setIcon(self, icon_enum):
        pixmap = self._PIXMAPS.get(icon_enum)
        if pixmap is None:
            self.icon_lbl.setVisible(False)
            return
        icon = QApplication.style().standardIcon(pixmap)
        self.icon_lbl.setPixmap(icon.pixmap(48, 48))
        self.icon_lbl.setVisible(True)


class ErrorDialog(MessageDialog):
    """MessageDialog with error title and icon."""

    def __init__(self, parent=None, title: str = None, text: str = None,
                 on_close: Optional[Callable[[], None]] = None):
        super().__init__(parent, title or _("Error"), text or _("Unknown error!"),
                         ok_text=_("OK"), icon=MessageDialog.Icon.Critical, on_close=on_close)
        self.ok_btn.set_style_type("Red")
