"""Line-oriented record format for mood entries.

One entry per line, six fields joined by ``|`` in a fixed order::

    date|mood|rating|category|reflection|emotion_notes

Nothing is escaped. The first four fields are positional; anything past the
fifth delimiter belongs to ``emotion_notes``, so pipes typed inside the notes
survive a round trip.
"""

from datetime import datetime
from typing import Iterable, Optional

import structlog

from .entry import DEFAULT_RATING, FIELD_DELIMITER, MoodEntry

logger = structlog.get_logger()

DELIMITER = FIELD_DELIMITER
FIELD_COUNT = 6

# Sorts last in newest-first listings and falls outside every time window
MIN_DATE = datetime.min

# strptime accepts non-padded month/day/hour, so these cover MM/dd and M/d
# with hh or h. Seconds and 24-hour variants are the other common US forms.
DATE_FORMATS = (
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y",
)


def encode_entry(entry: MoodEntry) -> str:
    """Serialize an entry to a single storage line (no trailing newline)."""
    return DELIMITER.join(
        [
            entry.date,
            entry.mood,
            str(entry.rating),
            entry.category,
            entry.reflection,
            entry.emotion_notes,
        ]
    )


def _parse_rating(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        logger.debug("rating_unparseable", value=text)
        return DEFAULT_RATING


def decode_line(line: str) -> Optional[MoodEntry]:
    """Parse a storage line back into an entry.

    Returns None for blank lines and for lines with fewer than six fields.
    Stored rating/category are kept as written, not re-derived from mood.
    """
    if not line or not line.strip():
        return None

    parts = line.rstrip("\r\n").split(DELIMITER)
    if len(parts) < FIELD_COUNT:
        logger.debug("record_malformed", fields=len(parts))
        return None

    return MoodEntry(
        date=parts[0].strip(),
        mood=parts[1].strip(),
        rating=_parse_rating(parts[2].strip()),
        category=parts[3].strip(),
        reflection=parts[4].strip(),
        emotion_notes=DELIMITER.join(parts[5:]).strip(),
    )


def decode_lines(lines: Iterable[str]) -> list[MoodEntry]:
    """Decode many lines, dropping the ones that don't parse. Order is kept."""
    entries = []
    for line in lines:
        entry = decode_line(line)
        if entry is not None:
            entries.append(entry)
    return entries


def parse_date_safe(text: Optional[str]) -> datetime:
    """Parse an entry date, falling back to MIN_DATE instead of raising."""
    if not text or not text.strip():
        return MIN_DATE
    text = text.strip()

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    try:
        dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("date_unparseable", value=text)
        return MIN_DATE
    if dt.tzinfo:
        dt = dt.replace(tzinfo=None)
    return dt
