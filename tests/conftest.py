"""Pytest configuration and fixtures for strftimekit tests."""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Callable, Iterator

import pytest

# Add the parent directory to sys.path so strftimekit can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def fixed_tz(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[str], None]]:
    """Switch the process's local zone for one test.

    Yields a function taking a TZ string. The original zone is restored
    on teardown.
    """

    def apply(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield apply
    monkeypatch.undo()
    time.tzset()
