import os

# Dialog tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from dialogkit.core.file_handler import FileHandler
from dialogkit.core.settings_store import MemorySettingsStore


@pytest.fixture(scope="session", autouse=True)
def dialogkit_home(tmp_path_factory):
    """Keeps config/ and logs/ of the test session out of the working tree."""
    home = tmp_path_factory.mktemp("dialogkit_home")
    os.environ["DIALOGKIT_HOME"] = str(home)
    FileHandler.reset()
    yield home
    FileHandler.reset()


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def store():
    return MemorySettingsStore()


class Recorder:
    """Callback that remembers the arguments of every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)


@pytest.fixture
def recorder():
    return Recorder
