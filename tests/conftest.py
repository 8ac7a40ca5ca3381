import sys

import pytest
from PySide6.QtCore import QCoreApplication


# QCoreApplication is required for QTimer
@pytest.fixture(scope="session")
def qapp():
    """Create a QCoreApplication instance for the test session."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv)
    yield app
