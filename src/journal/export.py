"""Mood journal export functionality."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from .entry import MoodEntry
from .notes import split_emotion_notes
from .report import filter_window


class MoodJournalExporter:
    """Export mood entries to various formats."""

    def __init__(self, entries: list[MoodEntry]):
        self.entries = entries

    def export_json(
        self,
        output_path: Path,
        days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> int:
        """Export entries to JSON.

        Args:
            output_path: Output file path
            days: Only include entries from last N days
            now: Reference time for ``days`` (defaults to now)

        Returns:
            Number of entries exported
        """
        entries = self._get_entries(days, now)

        export_data = {
            "exported_at": datetime.now().isoformat(),
            "count": len(entries),
            "entries": [e.to_dict() for e in entries],
        }

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(export_data, f, indent=2, ensure_ascii=False)

        return len(entries)

    def export_markdown(
        self,
        output_path: Path,
        days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> int:
        """Export entries to Markdown.

        Returns:
            Number of entries exported
        """
        entries = self._get_entries(days, now)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        lines = [
            "# Mood Journal Export",
            "",
            f"Exported: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            f"Entries: {len(entries)}",
            "",
            "---",
            "",
        ]

        for entry in entries:
            emotional, response = split_emotion_notes(entry.emotion_notes)
            lines.append(f"## {entry.date or 'Undated'}")
            lines.append("")
            lines.append(
                f"**Mood:** {entry.mood} | **Rating:** {entry.rating} | **Category:** {entry.category}"
            )
            lines.append("")
            lines.append(entry.reflection)
            lines.append("")
            lines.append(f"- Emotional response: {emotional}")
            lines.append(f"- Response: {response}")
            lines.append("")
            lines.append("---")
            lines.append("")

        with open(output_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines))

        return len(entries)

    def _get_entries(self, days: Optional[int], now: Optional[datetime]) -> list[MoodEntry]:
        if days:
            return filter_window(self.entries, days, now or datetime.now())
        return list(self.entries)
