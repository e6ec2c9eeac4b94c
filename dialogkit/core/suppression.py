"""
Dialog Kit: "don't ask again" window of confirmation dialogs.

When the user confirms with the suppression checkbox ticked, the dialog
stores "auto-confirm until <epoch ms>" under "Confirm.<dialogName>".
Later dialogs with the same name confirm themselves without showing up
until that moment has passed.
"""

import time
import logging
from typing import Callable

from dialogkit.core.errors import MissingCollaboratorError
from dialogkit.core.settings_store import SettingsStore

DIALOG_KIND = "Confirm"
DEFAULT_SUPPRESS_MINUTES = 2
MS_PER_MINUTE = 60000


def now_ms() -> int:
    return int(time.time() * 1000)


class SuppressionGate:
    def __init__(self, store: SettingsStore, clock: Callable[[], int] = None):
        if store is None:
            raise MissingCollaboratorError("A settings store is required to suppress confirmations")
        self.store = store
        self.clock = clock or now_ms
        self.logger = logging.getLogger("SuppressionGate")

    @staticmethod
    def key_for(dialog_name: str) -> str:
        return f"{DIALOG_KIND}.{dialog_name}"

    def suppressed_until(self, dialog_name: str) -> int:
        """Stored deadline in epoch ms; 0 when absent or unreadable."""
        raw = self.store.get(self.key_for(dialog_name))
        if not raw:
            return 0
        try:
            return int(raw)
        except (TypeError, ValueError):
            self.logger.warning(f"Ignoring unreadable suppression value for {dialog_name}: {raw!r}")
            return 0

    def is_suppressed(self, dialog_name: str) -> bool:
        until = self.suppressed_until(dialog_name)
        if until <= 0:
            return False
        if self.clock() > until:
            # Expired: forget it
            self.store.remove(self.key_for(dialog_name))
            self.logger.debug(f"Suppression of {dialog_name} expired")
            return False
        return True

    def suppress_for(self, dialog_name: str, minutes: float = None) -> int:
        """Auto-confirm `dialog_name` for the next `minutes` (default 2). Returns the deadline."""
        until = self.clock() + int((minutes or DEFAULT_SUPPRESS_MINUTES) * MS_PER_MINUTE)
        self.store.set(self.key_for(dialog_name), str(until))
        self.logger.info(f"Confirmation '{dialog_name}' suppressed for {minutes or DEFAULT_SUPPRESS_MINUTES} minute(s)")
        return until
