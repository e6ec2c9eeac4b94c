from PyQt6.QtWidgets import QLineEdit, QComboBox, QSpinBox, QPushButton
from PyQt6.QtCore import Qt

from dialogkit.ui.styles import Colors, DialogStyles


class StyledLineEdit(QLineEdit):
    """Single line input in the dialog dark theme."""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setStyleSheet(DialogStyles.input_style("QLineEdit"))


class StyledComboBox(QComboBox):
    """Combo box whose items carry their value as item data."""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setStyleSheet(DialogStyles.input_style("QComboBox") + f"""
            QComboBox QAbstractItemView {{
                background-color: {Colors.BG_MEDIUM};
                color: {Colors.TEXT_PRIMARY};
                selection-background-color: {Colors.SELECTION};
            }}
        """)

    def set_current_data(self, data):
        """Selects the item carrying `data`; no-op when absent."""
        index = self.findData(data)
        if index >= 0:
            self.setCurrentIndex(index)


class StyledSpinBox(QSpinBox):
    def __init__(self, parent=None, minimum=0, maximum=99):
        super().__init__(parent)
        self.setRange(minimum, maximum)
        self.setStyleSheet(DialogStyles.input_style("QSpinBox"))


class StyledButton(QPushButton):
    """
    Dialog button with a hand cursor.
    style_type picks one of the COLORS presets; unknown names fall back to 'Gray'.
    """
    # preset: (background, hover background, border)
    COLORS = {
        "Gray": (Colors.BG_MEDIUM, Colors.BG_LIGHT, Colors.BORDER_DEFAULT),
        "Blue": (Colors.SELECTION, Colors.PRIMARY, Colors.PRIMARY),
        "Green": (Colors.SUCCESS, "#2ecc71", "#2ecc71"),
        "Red": ("#c0392b", Colors.DANGER, Colors.DANGER),
    }

    def __init__(self, text, parent=None, style_type="Gray"):
        super().__init__(text, parent)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setMinimumWidth(80)
        self.style_type = style_type
        self._apply_style()

    def _apply_style(self):
        bg, hover, border = self.COLORS.get(self.style_type, self.COLORS["Gray"])
        self.setStyleSheet(f"""
            QPushButton {{
                background-color: {bg};
                color: {Colors.TEXT_PRIMARY};
                border: 1px solid {border};
                border-radius: 4px;
                padding: 6px 14px;
            }}
            QPushButton:hover {{ background-color: {hover}; border-color: {Colors.BORDER_HOVER}; }}
            QPushButton:disabled {{ background-color: #2c2c2c; color: {Colors.TEXT_MUTED}; border-color: #333; }}
        """)

    def set_style_type(self, style_type: str):
        self.style_type = style_type
        self._apply_style()
