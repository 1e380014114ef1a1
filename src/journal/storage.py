"""Per-user flat-file mood journal storage."""

from datetime import datetime
from pathlib import Path
from typing import Optional

import structlog

from .codec import decode_lines, encode_entry, parse_date_safe
from .entry import EntryNotFoundError, MoodEntry, create_entry, update_entry
from .report import MAX_BLOCKS, generate_report, write_report

logger = structlog.get_logger()

DEFAULT_USER = "default"


def safe_username(username: Optional[str]) -> str:
    """Username used in file names; blank becomes 'default'."""
    if not username or not username.strip():
        return DEFAULT_USER
    return username.strip()


class MoodJournalStorage:
    """Reads and writes one user's entry file and report file.

    Files live in ``data_dir``::

        Journal_<user>_Entries.txt   one encoded entry per line
        ShowMoodReport_<user>.txt    latest rendered report
    """

    def __init__(self, data_dir: str | Path, username: Optional[str] = None):
        self.data_dir = Path(data_dir).expanduser().resolve()
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.username = safe_username(username)
        self.entries_path = self.data_dir / f"Journal_{self.username}_Entries.txt"
        self.report_path = self.data_dir / f"ShowMoodReport_{self.username}.txt"

    def load_entries(self) -> list[MoodEntry]:
        """Read every entry in file order.

        Malformed lines are skipped; undecodable bytes become U+FFFD.
        """
        if not self.entries_path.exists():
            return []
        with open(self.entries_path, encoding="utf-8", errors="replace") as f:
            entries = decode_lines(f)
        logger.debug("entries_loaded", user=self.username, count=len(entries))
        return entries

    def append_entry(self, entry: MoodEntry) -> None:
        """Append a single entry line."""
        with open(self.entries_path, "a", encoding="utf-8") as f:
            f.write(encode_entry(entry) + "\n")

    def replace_all(self, entries: list[MoodEntry]) -> None:
        """Rewrite the whole file from ``entries``."""
        with open(self.entries_path, "w", encoding="utf-8") as f:
            for entry in entries:
                f.write(encode_entry(entry) + "\n")
        logger.debug("entries_rewritten", user=self.username, count=len(entries))

    def generate_report(
        self,
        entries: list[MoodEntry],
        now: Optional[datetime] = None,
        save: bool = True,
        max_blocks: int = MAX_BLOCKS,
    ) -> dict:
        """Render the mood report and, if ``save``, write it to the report file.

        Returns:
            generate_report() dict plus {saved, report_path}
        """
        result = generate_report(
            entries, now, title=self.entries_path.stem, max_blocks=max_blocks
        )
        result["saved"] = write_report(self.report_path, result["rendered_text"]) if save else False
        result["report_path"] = self.report_path
        return result


class MoodJournal:
    """In-memory entry list for one session, persisted after every change.

    Entries are addressed by position in load order (0-based).
    """

    def __init__(self, storage: MoodJournalStorage):
        self.storage = storage
        self.entries = storage.load_entries()

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, index: int) -> MoodEntry:
        if not 0 <= index < len(self.entries):
            raise EntryNotFoundError(f"No entry at position {index + 1}")
        return self.entries[index]

    def add(
        self,
        mood: str,
        reflection: str = "",
        emotion_notes: str = "",
        now: Optional[datetime] = None,
    ) -> MoodEntry:
        entry = create_entry(mood, reflection, emotion_notes, now=now)
        self.entries.append(entry)
        self.storage.append_entry(entry)
        logger.info("entry_added", user=self.storage.username, mood=entry.mood)
        return entry

    def edit(
        self,
        index: int,
        mood: Optional[str] = None,
        reflection: Optional[str] = None,
        emotion_notes: Optional[str] = None,
    ) -> MoodEntry:
        """Update the entry at ``index``; blank values keep the old ones."""
        entry = update_entry(self.get(index), mood, reflection, emotion_notes)
        self.storage.replace_all(self.entries)
        logger.info("entry_updated", user=self.storage.username, index=index)
        return entry

    def delete(self, index: int) -> MoodEntry:
        self.get(index)
        entry = self.entries.pop(index)
        self.storage.replace_all(self.entries)
        logger.info("entry_deleted", user=self.storage.username, index=index)
        return entry

    def sorted_for_display(self) -> list[tuple[int, MoodEntry]]:
        """(index, entry) pairs newest first; the stored order is untouched."""
        return sorted(
            enumerate(self.entries),
            key=lambda pair: parse_date_safe(pair[1].date),
            reverse=True,
        )

    def report(self, now: Optional[datetime] = None, save: bool = True, **kwargs) -> dict:
        return self.storage.generate_report(self.entries, now, save=save, **kwargs)
