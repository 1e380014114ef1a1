"""Mood entry record and mood-to-rating derivation."""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Optional

from shared_types import MoodCategory

DEFAULT_RATING = 5
ENTRY_DATE_FORMAT = "%m/%d/%Y %I:%M %p"
FIELD_DELIMITER = "|"

# normalized mood -> (rating, category)
MOOD_RATINGS: dict[str, tuple[int, MoodCategory]] = {
    "happy": (9, MoodCategory.EXCELLENT),
    "joyful": (9, MoodCategory.EXCELLENT),
    "calm": (8, MoodCategory.GOOD),
    "relaxed": (8, MoodCategory.GOOD),
    "neutral": (5, MoodCategory.MODERATE),
    "fine": (5, MoodCategory.MODERATE),
    "sad": (3, MoodCategory.LOW),
    "down": (3, MoodCategory.LOW),
    "angry": (2, MoodCategory.LOW),
    "annoyed": (2, MoodCategory.LOW),
}


class EntryNotFoundError(IndexError):
    """Raised when an entry position is outside the loaded journal."""


@dataclass
class MoodEntry:
    """One journaled mood record."""

    date: str = ""
    mood: str = ""
    rating: int = DEFAULT_RATING
    category: str = MoodCategory.UNKNOWN.value
    reflection: str = ""
    emotion_notes: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


def normalize_mood(text: Optional[str]) -> str:
    """Lowercase, trimmed mood label; blank becomes 'unknown'."""
    if not text or not text.strip():
        return "unknown"
    return text.strip().lower()


def derive_mood_rating(mood: Optional[str]) -> tuple[int, str]:
    """Map a mood label to its (rating, category) pair.

    Matching is case-insensitive and ignores surrounding whitespace.
    Anything outside the lookup table, including an empty label,
    rates 5 / Unknown.
    """
    rating, category = MOOD_RATINGS.get(
        normalize_mood(mood), (DEFAULT_RATING, MoodCategory.UNKNOWN)
    )
    return rating, category.value


def _single_line(text: Optional[str]) -> str:
    """Collapse line breaks so a field can't split its storage line."""
    return " ".join((text or "").splitlines()).strip()


def clean_field(text: Optional[str], name: str, allow_delimiter: bool = False) -> str:
    """Single-line, trimmed field value.

    Raises:
        ValueError: If a positional field contains the record delimiter
    """
    value = _single_line(text)
    if not allow_delimiter and FIELD_DELIMITER in value:
        raise ValueError(f"{name.capitalize()} cannot contain '{FIELD_DELIMITER}'")
    return value


def create_entry(
    mood: str,
    reflection: str = "",
    emotion_notes: str = "",
    now: Optional[datetime] = None,
) -> MoodEntry:
    """Build a new entry stamped with the current time and derived rating.

    Raises:
        ValueError: If mood contains '|'
    """
    mood = clean_field(mood, "mood")
    reflection = clean_field(reflection, "reflection", allow_delimiter=True)
    emotion_notes = clean_field(emotion_notes, "emotion notes", allow_delimiter=True)
    now = now or datetime.now()
    rating, category = derive_mood_rating(mood)
    return MoodEntry(
        date=now.strftime(ENTRY_DATE_FORMAT),
        mood=mood,
        rating=rating,
        category=category,
        reflection=reflection,
        emotion_notes=emotion_notes,
    )


def update_entry(
    entry: MoodEntry,
    mood: Optional[str] = None,
    reflection: Optional[str] = None,
    emotion_notes: Optional[str] = None,
) -> MoodEntry:
    """Apply an edit in place. Blank values keep the existing field.

    A mood change recomputes rating and category. All values are validated
    before anything is changed.

    Raises:
        ValueError: If mood contains '|'
    """
    mood = clean_field(mood, "mood")
    reflection = clean_field(reflection, "reflection", allow_delimiter=True)
    emotion_notes = clean_field(emotion_notes, "emotion notes", allow_delimiter=True)

    if mood:
        entry.mood = mood
        entry.rating, entry.category = derive_mood_rating(mood)
    if reflection:
        entry.reflection = reflection
    if emotion_notes:
        entry.emotion_notes = emotion_notes
    return entry
