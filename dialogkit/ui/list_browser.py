"""
Minimal browsing widget for the picker dialogs.

Lists (id, name, is_folder[, obj]) entries with a name filter and reports
through the picker protocol:
    selected(selection, is_double_click, is_folder)   file mode
    selected(selection, is_double_click, name)        object mode
    filter_changed({"name": text})

The dialog pushes its state back with set_filters(dict) and, for objects,
set_filter_predicate(pred). The predicate sees the optional fourth entry
element, or {"_id": id, "common": {"name": name}} when it is missing.
"""

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QListWidget, QListWidgetItem, QAbstractItemView
from PyQt6.QtCore import Qt, pyqtSignal

from dialogkit.core.lang_manager import _
from dialogkit.ui.common_widgets import StyledLineEdit


class ListBrowser(QWidget):
    selected = pyqtSignal(object, bool, object)
    filter_changed = pyqtSignal(dict)

    def __init__(self, entries=None, multi_select: bool = False, object_mode: bool = False,
                 filters: dict = None, parent=None):
        super().__init__(parent)
        self.object_mode = object_mode
        self.entries = list(entries or [])
        self.filter_predicate = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.filter_edit = StyledLineEdit()
        self.filter_edit.setPlaceholderText(_("Filter by name"))
        self.filter_edit.textEdited.connect(self._on_filter_edited)
        layout.addWidget(self.filter_edit)

        self.list_widget = QListWidget()
        if multi_select:
            self.list_widget.setSelectionMode(QAbstractItemView.SelectionMode.ExtendedSelection)
        self.list_widget.itemSelectionChanged.connect(self._on_selection_changed)
        self.list_widget.itemDoubleClicked.connect(self._on_double_clicked)
        layout.addWidget(self.list_widget)

        self.set_filters(filters)

    def set_filters(self, filters: dict):
        """Shows the given filter record; does not emit filter_changed."""
        self.filter_edit.setText((filters or {}).get("name", ""))
        self._populate()

    def set_filter_predicate(self, predicate):
        """Custom object filter applied on top of the name filter. None shows all."""
        self.filter_predicate = predicate
        self._populate()

    @staticmethod
    def _object_of(entry):
        if len(entry) > 3:
            return entry[3]
        return {"_id": entry[0], "common": {"name": entry[1]}}

    def visible_entries(self) -> list:
        text = self.filter_edit.text().lower()
        entries = [entry for entry in self.entries if not text or text in entry[1].lower()]
        if self.filter_predicate is None:
            return entries
        return [entry for entry in entries if self.filter_predicate(self._object_of(entry))]

    def _populate(self):
        self.list_widget.clear()
        for entry in self.visible_entries():
            entry_id, name, is_folder = entry[:3]
            item = QListWidgetItem(("📁 " if is_folder else "") + name)
            item.setData(Qt.ItemDataRole.UserRole, (entry_id, name, is_folder))
            self.list_widget.addItem(item)

    def _report(self, items, is_double_click: bool):
        if not items:
            self.selected.emit([], is_double_click, None)
            return
        ids = [item.data(Qt.ItemDataRole.UserRole)[0] for item in items]
        _id, name, is_folder = items[0].data(Qt.ItemDataRole.UserRole)
        self.selected.emit(ids, is_double_click, name if self.object_mode else is_folder)

    def _on_selection_changed(self):
        self._report(self.list_widget.selectedItems(), False)

    def _on_double_clicked(self, item):
        self._report([item], True)

    def _on_filter_edited(self, text: str):
        self._populate()
        self.filter_changed.emit({"name": text})
