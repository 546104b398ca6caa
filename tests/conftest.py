"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_transport():
    """Create mock MIDI transport recording send_midi calls."""
    mock = Mock()
    mock.send_midi = Mock(return_value=None)
    return mock


@pytest.fixture
def mock_port():
    """Create mock mido output port."""
    mock = Mock()
    mock.send = Mock(return_value=None)
    return mock
