"""
Dialog Kit: last-used filter criteria of the picker dialogs.

Each picker kind keeps one record per dialog name, e.g. the object picker
opened as "scripts" stores its filters under "SelectID.scripts".
"""

import json
import logging

from dialogkit.core.errors import MissingCollaboratorError
from dialogkit.core.settings_store import SettingsStore

DEFAULT_DIALOG_NAME = "default"


class FilterStore:
    """Load/merge/save of per-dialog filter records."""

    def __init__(self, store: SettingsStore, dialog_kind: str):
        if store is None:
            raise MissingCollaboratorError(f"{dialog_kind}: a settings store is required to persist filters")
        self.store = store
        self.dialog_kind = dialog_kind
        self.logger = logging.getLogger("FilterStore")

    def key_for(self, dialog_name: str = None) -> str:
        return f"{self.dialog_kind}.{dialog_name or DEFAULT_DIALOG_NAME}"

    def load(self, dialog_name: str = None) -> dict:
        """Returns the stored record, or {} when missing or unreadable."""
        key = self.key_for(dialog_name)
        raw = self.store.get(key)
        if not raw:
            return {}
        try:
            record = json.loads(raw)
        except ValueError as e:
            self.logger.warning(f"Ignoring malformed filters stored under {key}: {e}")
            return {}
        if not isinstance(record, dict):
            self.logger.warning(f"Ignoring non-object filters stored under {key}")
            return {}
        return record

    @staticmethod
    def merge(stored: dict, override: dict = None) -> dict:
        """Shallow override: keys in `override` win, the rest keep their stored value."""
        merged = dict(stored or {})
        if override:
            merged.update(override)
        return merged

    def save(self, dialog_name: str, record: dict) -> None:
        """Overwrites the full record of the dialog."""
        key = self.key_for(dialog_name)
        self.store.set(key, json.dumps(record or {}))
        self.logger.debug(f"Saved filters for {key}: {record}")

    def open(self, dialog_name: str = None, override: dict = None) -> dict:
        """Initial filters of a dialog: stored record merged with caller-supplied values."""
        return self.merge(self.load(dialog_name), override)
