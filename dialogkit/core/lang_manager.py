"""
Dialog Kit: translation of user-visible dialog strings (gettext).
Catalogs live in config/locale/<lang>/LC_MESSAGES/dialogkit.mo.

Usage:
    from dialogkit.core.lang_manager import _
    button.setText(_("Cancel"))
"""

import os
import gettext
import logging
from PyQt6.QtCore import QObject, pyqtSignal

from dialogkit.core.file_handler import FileHandler

DOMAIN = "dialogkit"
DEFAULT_LANGUAGE = "en"


class LangManager(QObject):
    """
    Singleton language manager.
    Missing catalogs are not an error: strings are then shown untranslated.
    """

    _instance = None
    language_changed = pyqtSignal(str)

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        super().__init__()
        self._initialized = True

        self.logger = logging.getLogger("LangManager")
        self.locale_dir = os.path.join(FileHandler().config_dir, "locale")

        self._translator = None
        self._current_lang_code = DEFAULT_LANGUAGE
        self._lang_names = {
            "ja": "日本語",
            "en": "English"
        }

        lang = os.environ.get("DIALOGKIT_LANG")
        if lang:
            self._load_language(lang)

    def _load_language(self, lang_code: str) -> bool:
        """Load the catalog of lang_code. Returns False when none is installed."""
        try:
            self._translator = gettext.translation(
                DOMAIN,
                localedir=self.locale_dir,
                languages=[lang_code],
                fallback=False
            )
        except OSError:
            if lang_code != DEFAULT_LANGUAGE:
                self.logger.warning(f"No translation found for: {lang_code}")
                return False
            # 英語はカタログなしでも可
            self._translator = None
        self._current_lang_code = lang_code
        self.logger.info(f"Language loaded: {lang_code}")
        return True

    def gettext(self, message: str) -> str:
        """Translate a message."""
        if self._translator:
            return self._translator.gettext(message)
        return message

    def set_language(self, lang_code: str) -> bool:
        """Switch to a different language."""
        if lang_code == self._current_lang_code:
            return True
        old_lang = self._current_lang_code
        if self._load_language(lang_code):
            self.logger.info(f"set_language: {old_lang} -> {lang_code}")
            self.language_changed.emit(lang_code)
            return True
        return False

    @property
    def current_language(self) -> str:
        return self._current_lang_code

    @property
    def current_language_name(self) -> str:
        return self._lang_names.get(self._current_lang_code, self._current_lang_code)


# Singleton accessor
_lang_manager = None

def get_lang_manager() -> LangManager:
    """Get or create the singleton LangManager instance."""
    global _lang_manager
    if _lang_manager is None:
        _lang_manager = LangManager()
    return _lang_manager


def _(message: str) -> str:
    """Translate a message. Standard gettext shorthand."""
    return get_lang_manager().gettext(message)
