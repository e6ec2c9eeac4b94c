"""
Dialog Kit Dialogs Package
Re-exports all dialog classes.

All imports like `from dialogkit.ui.dialogs import ConfirmDialog` are valid.
"""

from dialogkit.ui.dialogs.base_dialog import BaseDialog
from dialogkit.ui.dialogs.confirm_dialog import ConfirmDialog, SUPPRESSED_CONFIRM_DELAY_MS
from dialogkit.ui.dialogs.message_dialog import MessageDialog, ErrorDialog
from dialogkit.ui.dialogs.text_input_dialog import TextInputDialog
from dialogkit.ui.dialogs.cron_dialog import CronDialog, ComplexCronDialog, SimpleCronDialog
from dialogkit.ui.dialogs.picker_dialog import PickerDialog
from dialogkit.ui.dialogs.select_file_dialog import SelectFileDialog, FileSelectDialog
from dialogkit.ui.dialogs.select_id_dialog import SelectIDDialog

__all__ = [
    'BaseDialog',
    'ConfirmDialog',
    'SUPPRESSED_CONFIRM_DELAY_MS',
    'MessageDialog',
    'ErrorDialog',
    'TextInputDialog',
    'CronDialog',
    'ComplexCronDialog',
    'SimpleCronDialog',
    'PickerDialog',
    'SelectFileDialog',
    'FileSelectDialog',
    'SelectIDDialog',
]
