"""Tests for mood entries and rating derivation."""

from datetime import datetime

import pytest

from journal.entry import create_entry, derive_mood_rating, normalize_mood, update_entry


class TestDeriveMoodRating:
    @pytest.mark.parametrize(
        "mood,expected",
        [
            ("happy", (9, "Excellent")),
            ("joyful", (9, "Excellent")),
            ("calm", (8, "Good")),
            ("relaxed", (8, "Good")),
            ("neutral", (5, "Moderate")),
            ("fine", (5, "Moderate")),
            ("sad", (3, "Low")),
            ("down", (3, "Low")),
            ("angry", (2, "Low")),
            ("annoyed", (2, "Low")),
        ],
    )
    def test_lookup(self, mood, expected):
        assert derive_mood_rating(mood) == expected

    def test_case_and_whitespace_insensitive(self):
        assert derive_mood_rating("Happy") == derive_mood_rating("happy")
        assert derive_mood_rating("  HAPPY ") == (9, "Excellent")

    def test_unknown_moods(self):
        assert derive_mood_rating("") == (5, "Unknown")
        assert derive_mood_rating("ecstatic") == (5, "Unknown")
        assert derive_mood_rating(None) == (5, "Unknown")


def test_normalize_mood():
    assert normalize_mood("  Calm ") == "calm"
    assert normalize_mood("   ") == "unknown"


class TestCreateEntry:
    def test_stamps_date_and_rating(self):
        entry = create_entry("Relaxed", "beach", "notes", now=datetime(2024, 3, 5, 14, 7))
        assert entry.date == "03/05/2024 02:07 PM"
        assert entry.mood == "Relaxed"
        assert entry.rating == 8
        assert entry.category == "Good"


class TestUpdateEntry:
    def test_mood_change_rederives(self):
        entry = create_entry("happy", now=datetime(2024, 1, 1))
        update_entry(entry, mood="angry")
        assert (entry.rating, entry.category) == (2, "Low")

    def test_blank_values_keep_existing(self):
        entry = create_entry("happy", "day", "notes", now=datetime(2024, 1, 1))
        update_entry(entry, mood="  ", reflection="", emotion_notes=None)
        assert entry.mood == "happy"
        assert entry.reflection == "day"
        assert entry.emotion_notes == "notes"
        assert entry.rating == 9

    def test_edit_strips_mood(self):
        entry = create_entry("sad", now=datetime(2024, 1, 1))
        update_entry(entry, mood="  calm ")
        assert entry.mood == "calm"

    def test_rejected_edit_leaves_entry_unchanged(self):
        entry = create_entry("happy", "day", now=datetime(2024, 1, 1))
        with pytest.raises(ValueError):
            update_entry(entry, mood="sad|calm", reflection="new")
        assert (entry.mood, entry.reflection) == ("happy", "day")


class TestFieldCleaning:
    def test_mood_trimmed(self):
        assert create_entry(" happy ", now=datetime(2024, 1, 1)).mood == "happy"

    def test_delimiter_rejected_in_mood(self):
        with pytest.raises(ValueError, match=r"Mood cannot contain '\|'"):
            create_entry("happy|calm", "day", now=datetime(2024, 1, 1))

    def test_free_text_may_contain_delimiter(self):
        entry = create_entry("happy", "a | b", "c | d", now=datetime(2024, 1, 1))
        assert (entry.reflection, entry.emotion_notes) == ("a | b", "c | d")

    def test_line_breaks_collapsed(self):
        entry = create_entry("hap\npy", "line one\r\nline two", "x\ny", now=datetime(2024, 1, 1))
        assert entry.mood == "hap py"
        assert entry.reflection == "line one line two"
        assert entry.emotion_notes == "x y"
