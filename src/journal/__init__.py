from .codec import decode_line, encode_entry, parse_date_safe
from .entry import MoodEntry, derive_mood_rating
from .report import build_report, group_and_rank, render_bar_chart
from .storage import MoodJournal, MoodJournalStorage

__all__ = [
    "MoodEntry",
    "MoodJournal",
    "MoodJournalStorage",
    "build_report",
    "decode_line",
    "derive_mood_rating",
    "encode_entry",
    "group_and_rank",
    "parse_date_safe",
    "render_bar_chart",
]
