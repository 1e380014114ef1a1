"""Shared test fixtures for moodlog."""

import sys
from datetime import datetime
from pathlib import Path

import pytest
import yaml

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def now():
    """Fixed reference time for window and report tests."""
    return datetime(2024, 1, 3, 12, 0)


@pytest.fixture
def sample_entries():
    """Entries spread across the weekly, monthly and overall windows."""
    from journal.entry import MoodEntry

    return [
        MoodEntry(
            "01/01/2024 09:00 AM", "happy", 9, "Excellent", "Good day",
            "EmotionalResponse: sun | Response: walked",
        ),
        MoodEntry(
            "01/02/2024 09:00 AM", "sad", 3, "Low", "Rough day",
            "EmotionalResponse: rain | Response: slept",
        ),
        MoodEntry("12/15/2023 08:30 PM", "calm", 8, "Good", "Quiet evening", ""),
        MoodEntry("06/01/2023", "happy", 9, "Excellent", "Summer", ""),
        MoodEntry("not-a-date", "angry", 2, "Low", "Lost the date", ""),
    ]


@pytest.fixture
def data_dir(tmp_path):
    d = tmp_path / "data"
    d.mkdir()
    return d


@pytest.fixture
def storage(data_dir):
    from journal.storage import MoodJournalStorage

    return MoodJournalStorage(data_dir, "alice")


@pytest.fixture
def populated_storage(storage, sample_entries):
    """Storage whose entry file already holds sample_entries."""
    storage.replace_all(sample_entries)
    return storage


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Write a config pointing every path into tmp_path and select it via env."""
    config = {
        "paths": {
            "data_dir": str(tmp_path / "data"),
            "users_file": str(tmp_path / "data" / "users.txt"),
            "log_file": str(tmp_path / "moodlog.log"),
        },
        "logging": {"level": "WARNING"},
    }
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump(config))
    monkeypatch.setenv("MOODLOG_CONFIG", str(path))
    monkeypatch.delenv("MOODLOG_USER", raising=False)
    monkeypatch.delenv("MOODLOG_PASSWORD", raising=False)
    return path
