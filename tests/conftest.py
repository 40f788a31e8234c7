"""
Shared test configuration.

Adds ``src`` to the import path and provides a notification recorder
plus ready-made workspaces writing into ``tmp_path``.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parent.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


class RecordingSink:
    """Notification sink that remembers every (message, severity) pair."""

    def __init__(self):
        self.calls = []

    def __call__(self, message, severity):
        self.calls.append((message, severity))

    @property
    def messages(self):
        return [message for message, _ in self.calls]

    @property
    def last(self):
        return self.calls[-1] if self.calls else None


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def settings(tmp_path):
    from cardledger.domain.config import LedgerSettings

    return LedgerSettings(output_dir=tmp_path / "output")


@pytest.fixture
def workspace(settings, sink):
    from cardledger.application.workspace import LedgerWorkspace

    return LedgerWorkspace(settings, notify=sink, confirm=lambda _msg: True)


def write_sheet(path: Path, rows: list[list]) -> Path:
    """Write plain rows (first = headers) to an .xlsx file."""
    from openpyxl import Workbook

    wb = Workbook()
    ws = wb.active
    for values in rows:
        ws.append(values)
    wb.save(path)
    return path


@pytest.fixture
def make_sheet(tmp_path):
    """Factory writing rows to ``tmp_path / name``."""

    def _make(name: str, rows: list[list]) -> Path:
        return write_sheet(tmp_path / name, rows)

    return _make
