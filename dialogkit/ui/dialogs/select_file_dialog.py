from dialogkit.ui.dialogs.picker_dialog import PickerDialog


class SelectFileDialog(PickerDialog):
    """File picker. on_ok(path) or on_ok([paths]) with multi_select."""
    DIALOG_KIND = "SelectFile"
    DEFAULT_TITLE = "Please select file..."


class FileSelectDialog(PickerDialog):
    """
    Older single-file picker.
    Ok is only enabled when the selection kind (file or folder) matches
    select_only_folders.
    """
    DIALOG_KIND = "FileSelect"
    DEFAULT_TITLE = "Please select file..."

    def __init__(self, parent=None, **kwargs):
        kwargs["multi_select"] = False
        super().__init__(parent, **kwargs)

    def can_confirm(self) -> bool:
        if not self.state.selected:
            return False
        return self.state.is_folder == self.state.select_only_folders
