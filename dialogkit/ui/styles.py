"""
Shared UI Styles - colors and stylesheets of the dialogs.

Usage:
    from dialogkit.ui.styles import DialogStyles
    dlg.setStyleSheet(DialogStyles.BASE)
"""


class Colors:
    """Common color constants."""

    # Backgrounds
    BG_DARK = "#2b2b2b"
    BG_MEDIUM = "#3b3b3b"
    BG_LIGHT = "#4a4a4a"

    # Accents
    PRIMARY = "#3498db"
    SELECTION = "#2980b9"
    SUCCESS = "#27ae60"
    WARNING = "#e67e22"
    DANGER = "#e74c3c"

    # Text
    TEXT_PRIMARY = "#ffffff"
    TEXT_SECONDARY = "#aaaaaa"
    TEXT_MUTED = "#666666"

    # Borders
    BORDER_DEFAULT = "#555555"
    BORDER_HOVER = "#777777"


class DialogStyles:
    """Reusable dialog stylesheet templates."""

    # Dark dialog body shared by every dialog of the kit
    BASE = """
        QDialog { background-color: #1e1e1e; color: white; }
        QLabel { color: #eeeeee; font-size: 13px; background: transparent; }
        QCheckBox, QRadioButton { color: #dddddd; spacing: 6px; }
        QListWidget, QTreeWidget {
            background-color: #2b2b2b; color: #ffffff;
            border: 1px solid #555; border-radius: 4px;
        }
        QListWidget::item:selected, QTreeWidget::item:selected { background-color: #2980b9; }
    """

    # Human readable cron description under the editors
    CRON_PREVIEW = "color: #aaaaaa; font-style: italic; padding: 4px 0px;"

    # Validation message of the text input dialog
    ERROR_LABEL = "color: #e74c3c; font-size: 12px;"

    # Body text of message/error dialogs
    MESSAGE_TEXT = "color: #eeeeee; font-size: 13px;"

    @staticmethod
    def input_style(widget: str) -> str:
        """Dark input box stylesheet for the given widget class name."""
        return f"""
            {widget} {{
                background-color: {Colors.BG_MEDIUM};
                color: {Colors.TEXT_PRIMARY};
                border: 1px solid {Colors.BORDER_DEFAULT};
                border-radius: 4px;
                padding: 3px 6px;
            }}
            {widget}:hover, {widget}:focus {{ border-color: {Colors.PRIMARY}; }}
        """
