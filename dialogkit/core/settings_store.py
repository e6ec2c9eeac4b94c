"""
Dialog Kit: persistent key/value settings.

Dialogs never reach into a global storage; they receive a SettingsStore.
Keys look like "<DialogKind>.<dialogName>" and values are strings
(usually JSON).

Usage:
    from dialogkit.core.settings_store import SqliteSettingsStore
    store = SqliteSettingsStore()             # config/global.db
    store.set("SelectID.default", '{"role": "level"}')
"""

import os
import sqlite3
import logging
from typing import Optional

from dialogkit.core.file_handler import FileHandler


class SettingsStore:
    """Interface of the injected settings store."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class MemorySettingsStore(SettingsStore):
    """Process-local store; used when nothing has to survive a restart."""

    def __init__(self, initial: dict = None):
        self._data = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list:
        return list(self._data)

    def __contains__(self, key):
        return key in self._data


class SqliteSettingsStore(SettingsStore):
    """Settings kept in the dialog_settings table of the global SQLite database."""

    def __init__(self, db_path: str = None):
        self.logger = logging.getLogger("SettingsStore")
        if db_path is None:
            handler = FileHandler()
            handler.ensure_config_dir()
            db_path = handler.db_path
        elif os.path.dirname(db_path):
            os.makedirs(os.path.dirname(db_path), exist_ok=True)
        self.db_path = db_path
        self._create_tables()

    def get_connection(self):
        return sqlite3.connect(self.db_path)

    def _create_tables(self):
        try:
            with self.get_connection() as conn:
                conn.execute('''CREATE TABLE IF NOT EXISTS dialog_settings (
                    key TEXT PRIMARY KEY,
                    value TEXT
                )''')
                conn.commit()
            self.logger.info(f"Settings database initialized at {self.db_path}")
        except sqlite3.Error as e:
            self.logger.error(f"Failed to initialize settings database: {e}")
            raise

    def get(self, key: str) -> Optional[str]:
        with self.get_connection() as conn:
            cur = conn.cursor()
            cur.execute("SELECT value FROM dialog_settings WHERE key = ?", (key,))
            res = cur.fetchone()
            return res[0] if res else None

    def set(self, key: str, value: str) -> None:
        with self.get_connection() as conn:
            conn.execute("INSERT OR REPLACE INTO dialog_settings (key, value) VALUES (?, ?)", (key, str(value)))
            conn.commit()

    def remove(self, key: str) -> None:
        with self.get_connection() as conn:
            conn.execute("DELETE FROM dialog_settings WHERE key = ?", (key,))
            conn.commit()
