"""Shared enums and types for moodlog."""

from enum import StrEnum


class MoodCategory(StrEnum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    MODERATE = "Moderate"
    LOW = "Low"
    UNKNOWN = "Unknown"
