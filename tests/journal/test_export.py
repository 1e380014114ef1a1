"""Tests for mood journal export functionality."""

import json

import pytest

from journal.export import MoodJournalExporter


@pytest.fixture
def exporter(sample_entries):
    return MoodJournalExporter(sample_entries)


class TestMoodJournalExportJSON:
    def test_export_json_all(self, exporter, tmp_path):
        out = tmp_path / "export.json"
        count = exporter.export_json(out)
        assert count == 5

        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["count"] == 5
        assert data["entries"][0]["mood"] == "happy"
        assert data["entries"][0]["emotion_notes"].startswith("EmotionalResponse:")
        assert "exported_at" in data

    def test_export_json_days(self, exporter, tmp_path, now):
        out = tmp_path / "week.json"
        assert exporter.export_json(out, days=7, now=now) == 2

    def test_export_json_creates_parent_dirs(self, exporter, tmp_path):
        out = tmp_path / "sub" / "dir" / "export.json"
        assert exporter.export_json(out) == 5
        assert out.exists()

    def test_export_json_empty(self, tmp_path):
        out = tmp_path / "empty.json"
        assert MoodJournalExporter([]).export_json(out) == 0
        assert json.loads(out.read_text(encoding="utf-8"))["entries"] == []


class TestMoodJournalExportMarkdown:
    def test_export_markdown(self, exporter, tmp_path):
        out = tmp_path / "export.md"
        count = exporter.export_markdown(out)
        assert count == 5

        text = out.read_text(encoding="utf-8")
        assert text.startswith("# Mood Journal Export")
        assert "## 01/01/2024 09:00 AM" in text
        assert "**Mood:** sad | **Rating:** 3 | **Category:** Low" in text
        assert "- Emotional response: rain" in text
        assert "- Response: slept" in text

    def test_export_markdown_days(self, exporter, tmp_path, now):
        out = tmp_path / "month.md"
        assert exporter.export_markdown(out, days=30, now=now) == 3
