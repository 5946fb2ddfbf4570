import json
from pathlib import Path

import pytest

from pomocli.pomodoro_api.task_store import TaskStore


class FakeClock:
    """Wall clock whose sleep() advances time instantly."""

    def __init__(self, start: float = 1_000_000.0):
        self.current = start
        self.sleeps = []

    def now(self) -> float:
        return self.current

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.current += seconds

    @property
    def elapsed(self) -> float:
        return sum(self.sleeps)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture
def report_file(tmp_path: Path) -> Path:
    return tmp_path / "report.txt"


@pytest.fixture
def store(data_file, report_file) -> TaskStore:
    s = TaskStore(data_file, report_file)
    s.load()
    return s


@pytest.fixture
def write_tasks(data_file):
    """Write raw task dicts (or any JSON value) straight to the data file."""
    def _write(payload):
        data_file.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return data_file
    return _write


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep config lookups away from the real home directory and env files."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("POMOCLI_HOME", str(home / ".pomocli"))
    for key in ("POMOCLI_DATA_FILE", "POMOCLI_REPORT_FILE", "POMOCLI_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return home
