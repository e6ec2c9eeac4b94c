"""
Common part of the file and object pickers.

The browsing widget is supplied by the caller. It talks to the dialog
through two signals (or the equivalent slots, when it is driven directly):

    selected(object, bool, object)  -> handle_select(selected, is_double_click, extra)
    filter_changed(dict)            -> handle_filter_changed(filters)

`extra` is the folder flag for file browsers and the display name for
object browsers.

The dialog hands the merged filter record back with `browser.set_filters(dict)`
when it opens; the object picker also calls
`browser.set_filter_predicate(predicate)` with its custom filter.
"""

from typing import Callable, Optional

from PyQt6.QtWidgets import QLabel, QWidget

from dialogkit.core.errors import MissingCollaboratorError
from dialogkit.core.filter_store import FilterStore
from dialogkit.core.lang_manager import _
from dialogkit.core.selection import PickerState
from dialogkit.core.settings_store import SettingsStore
from dialogkit.ui.dialogs.base_dialog import BaseDialog


class PickerDialog(BaseDialog):
    DIALOG_KIND = ""
    DEFAULT_TITLE = ""

    def __init__(self, parent=None, title: str = None, dialog_name: str = None,
                 connection=None, store: SettingsStore = None,
                 selected=None, multi_select: bool = False, select_only_folders: bool = False,
                 filters: dict = None, ok_text: str = None, cancel_text: str = None,
                 browser: Optional[QWidget] = None,
                 on_ok: Optional[Callable] = None, on_close: Optional[Callable[[], None]] = None):
        if connection is None:
            raise MissingCollaboratorError(f"{self.DIALOG_KIND}: a connection is required")
        filter_store = FilterStore(store, self.DIALOG_KIND)

        title = title or _(self.DEFAULT_TITLE)
        super().__init__(parent, title, on_close)
        self.resize(720, 520)
        self.title = title
        self.filter_store = filter_store
        self.connection = connection
        self.dialog_name = dialog_name
        self.on_ok = on_ok

        self.filters = self.filter_store.open(dialog_name, filters)
        self.state = PickerState.open(selected, multi_select, select_only_folders)

        self.header_lbl = QLabel()
        self.header_lbl.setStyleSheet("font-weight: bold; font-style: italic;")
        self.main_layout.addWidget(self.header_lbl)

        self.browser = browser
        if browser is not None:
            browser.selected.connect(self.handle_select)
            browser.filter_changed.connect(self.handle_filter_changed)
            browser.set_filters(self.filters)
            self.main_layout.addWidget(browser, 1)
        else:
            self.main_layout.addStretch(1)

        self.main_layout.addLayout(self._create_button_row(ok_text, cancel_text))
        self._refresh()

    @property
    def selected(self) -> tuple:
        return self.state.selected

    def _describe_selection(self) -> str:
        if len(self.state.selected) == 1:
            return self.state.selected[0]
        return _("{count} items").format(count=len(self.state.selected))

    def _refresh(self):
        if self.state.selected:
            text = _("Selected: {selection}").format(selection=self._describe_selection())
        else:
            text = self.title
        self.header_lbl.setText(text)
        self.setWindowTitle(text)
        self.ok_btn.setEnabled(self.can_confirm())

    def can_confirm(self) -> bool:
        return self.state.can_confirm()

    def _apply_select(self, selected, is_double_click: bool, is_folder=None, display_name: str = None):
        self.state, auto_confirm = self.state.apply_select(
            selected, is_double_click=is_double_click, is_folder=is_folder, display_name=display_name)
        self._refresh()
        if auto_confirm:
            self.logger.debug(f"Double click on {self.state.selected}, confirming")
            self.handle_ok()

    def handle_select(self, selected, is_double_click: bool = False, is_folder=None):
        self._apply_select(selected, is_double_click, is_folder=is_folder)

    def handle_filter_changed(self, filters: dict):
        self.filters = dict(filters or {})
        self.filter_store.save(self.dialog_name, self.filters)

    def _emit_ok(self):
        if self.on_ok:
            self.on_ok(self.state.confirm_value())

    def handle_ok(self):
        if self.is_closed or not self.can_confirm():
            return
        self._emit_ok()
        self._finish(True)
