"""
Dialog Kit: selection state of the file and object pickers.

The browsing widget reports every selection change as
(selected, is_double_click, is_folder). `PickerState.apply_select` turns that
report into the next state plus a "confirm now" decision; the dialog only
has to call its Ok handler when asked to.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Union

Incoming = Union[str, Iterable[str], None]


def reconcile(current: tuple, incoming: Incoming, multi_select: bool = True) -> tuple:
    """Returns the canonical selection for an incoming selection event.

    Empty entries and duplicates are dropped (first occurrence wins);
    single-select keeps the first identifier only.
    """
    if incoming is None:
        return tuple(current or ())
    if isinstance(incoming, str):
        incoming = [incoming]

    selected = []
    for item in incoming:
        if item and item not in selected:
            selected.append(item)

    if not multi_select:
        selected = selected[:1]
    return tuple(selected)


def should_auto_confirm(is_double_click: bool, is_folder: Optional[bool],
                        select_only_folders: bool) -> bool:
    """Double-click confirms files in normal pickers and folders in folder-only pickers."""
    if not is_double_click:
        return False
    return bool(is_folder) == bool(select_only_folders)


@dataclass(frozen=True)
class PickerState:
    selected: tuple = ()
    is_folder: bool = False
    display_name: str = ""
    multi_select: bool = False
    select_only_folders: bool = False

    @classmethod
    def open(cls, selected: Incoming = None, multi_select: bool = False,
             select_only_folders: bool = False) -> 'PickerState':
        return cls(
            selected=reconcile((), selected, multi_select),
            multi_select=multi_select,
            select_only_folders=select_only_folders,
        )

    def apply_select(self, incoming: Incoming, is_double_click: bool = False,
                     is_folder: Optional[bool] = None, display_name: str = None):
        """Returns (next_state, auto_confirm)."""
        state = replace(
            self,
            selected=reconcile(self.selected, incoming, self.multi_select),
            is_folder=bool(is_folder),
            display_name=self.display_name if display_name is None else display_name,
        )
        return state, should_auto_confirm(is_double_click, is_folder, self.select_only_folders)

    def clear(self) -> 'PickerState':
        return replace(self, selected=(), is_folder=False, display_name="")

    def can_confirm(self) -> bool:
        if not self.selected:
            return False
        if self.select_only_folders and len(self.selected) == 1 and not self.is_folder:
            return False
        return True

    def confirm_value(self) -> Union[str, list]:
        """Single id ('' when nothing is selected) or the ordered list for multi-select."""
        if self.multi_select:
            return list(self.selected)
        return self.selected[0] if self.selected else ''
