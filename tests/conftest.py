"""Shared test fixtures."""

import csv
import sys
import types
from pathlib import Path

import pytest

from notionflow import InMemoryRecordStore


@pytest.fixture
def store():
    """Provide a fresh in-memory record store for each test."""
    return InMemoryRecordStore()


@pytest.fixture
def write_csv(tmp_path):
    """Write a header and rows to a CSV file under tmp_path and return its path."""

    def _write(header: list[str], rows: list[list[str]], name: str = "people.csv") -> Path:
        csv_file = tmp_path / name
        with open(csv_file, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(header)
            writer.writerows(rows)
        return csv_file

    return _write


@pytest.fixture
def fake_dialog(monkeypatch):
    """Install a stand-in tkinter whose file dialog returns state["chosen"]."""
    state = {"chosen": "", "kwargs": None, "destroyed": False}

    class FakeRoot:
        def withdraw(self):
            pass

        def destroy(self):
            state["destroyed"] = True

    def askopenfilename(**kwargs):
        state["kwargs"] = kwargs
        return state["chosen"]

    tkinter = types.ModuleType("tkinter")
    filedialog = types.ModuleType("tkinter.filedialog")
    filedialog.askopenfilename = askopenfilename
    tkinter.filedialog = filedialog
    tkinter.TclError = type("TclError", (Exception,), {})
    tkinter.Tk = FakeRoot

    monkeypatch.setitem(sys.modules, "tkinter", tkinter)
    monkeypatch.setitem(sys.modules, "tkinter.filedialog", filedialog)
    return state
