from typing import Callable, Optional, Union

from dialogkit.core.object_filter import build_filter_predicate, apply_filter
from dialogkit.ui.dialogs.picker_dialog import PickerDialog


class SelectIDDialog(PickerDialog):
    """
    Object picker.

    on_ok(value, display_name); the browser reports the display name of the
    clicked object as the third argument of `selected`. Objects have no
    folder kind, so a double click always confirms.
    """
    DIALOG_KIND = "SelectID"
    DEFAULT_TITLE = "Please select object ID..."

    def __init__(self, parent=None, filter_func: Union[Callable[[dict], bool], str, None] = None,
                 allow_legacy_filter_source: bool = False, **kwargs):
        kwargs.pop("select_only_folders", None)
        predicate = build_filter_predicate(filter_func, allow_legacy_filter_source)
        super().__init__(parent, **kwargs)
        self.filter_predicate = predicate
        if self.browser is not None:
            self.browser.set_filter_predicate(predicate)

    @property
    def display_name(self) -> str:
        return self.state.display_name

    def visible_objects(self, objects) -> list:
        """Objects the browser should list under the custom filter."""
        return apply_filter(objects, self.filter_predicate)

    def _describe_selection(self) -> str:
        if len(self.state.selected) == 1 and self.state.display_name:
            return f"{self.state.display_name} [{self.state.selected[0]}]"
        return super()._describe_selection()

    def handle_select(self, selected, is_double_click: bool = False, name: Optional[str] = None):
        self._apply_select(selected, is_double_click, is_folder=False, display_name=name or "")

    def _emit_ok(self):
        if self.on_ok:
            self.on_ok(self.state.confirm_value(), self.state.display_name)
