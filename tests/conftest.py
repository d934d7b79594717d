import os

import pytest

# Qt must pick its platform plugin before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from notevault.codec import ObfuscationCodec
from notevault.notes import NoteStore
from notevault.passwords import PasswordStore
from notevault.session import ManagerSession


@pytest.fixture
def codec():
    """Codec with the default shift."""
    return ObfuscationCodec()


@pytest.fixture
def note_store():
    """Fresh empty note store."""
    return NoteStore()


@pytest.fixture
def password_store():
    """Fresh empty password store."""
    return PasswordStore()


@pytest.fixture
def session(note_store, password_store):
    """Session wired to the fresh stores so tests can inspect them directly."""
    return ManagerSession(notes=note_store, passwords=password_store)


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by all window tests."""
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
