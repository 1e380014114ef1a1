"""Mood aggregation and text bar-chart reports."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

import structlog

from .codec import parse_date_safe
from .entry import ENTRY_DATE_FORMAT, MoodEntry

logger = structlog.get_logger()

BAR_CHAR = "█"
MAX_BLOCKS = 35
RULE_WIDTH = 70
NO_DATA = "No data available."
UNKNOWN_GROUP = "Unknown"

WEEKLY_DAYS = 7
MONTHLY_DAYS = 30


@dataclass
class MoodGroup:
    """Entries sharing one mood label."""

    mood: str
    count: int
    average_rating: float


@dataclass
class MoodReport:
    """Weekly, monthly and overall breakdowns for one point in time."""

    generated: datetime
    weekly: list[MoodEntry] = field(default_factory=list)
    monthly: list[MoodEntry] = field(default_factory=list)
    overall: list[MoodEntry] = field(default_factory=list)
    max_blocks: int = MAX_BLOCKS

    def sections(self) -> list[tuple[str, str]]:
        """(heading, chart) pairs in display order."""
        return [
            (
                f"WEEKLY MOOD REPORT (Last {WEEKLY_DAYS} Days)",
                render_bar_chart(group_and_rank(self.weekly), self.max_blocks),
            ),
            (
                f"MONTHLY MOOD REPORT (Last {MONTHLY_DAYS} Days)",
                render_bar_chart(group_and_rank(self.monthly), self.max_blocks),
            ),
            (
                "OVERALL MOOD SUMMARY",
                render_bar_chart(group_and_rank(self.overall), self.max_blocks),
            ),
        ]

    def render(self, title: Optional[str] = None) -> str:
        """Plain-text report, identical for console and file targets."""
        lines = []
        if title:
            lines.append(f"Mood Report for {title}")
        lines.append(f"Generated: {self.generated.strftime(ENTRY_DATE_FORMAT)}")
        lines.append("")
        for heading, chart in self.sections():
            lines.append(heading)
            lines.append("")
            lines.append(chart)
            lines.append("")
        return "\n".join(lines)


def filter_window(entries: list[MoodEntry], days: int, now: datetime) -> list[MoodEntry]:
    """Entries dated within the last ``days`` days of ``now``.

    Entries whose date can't be parsed never qualify.
    """
    cutoff = now - timedelta(days=days)
    return [e for e in entries if parse_date_safe(e.date) >= cutoff]


def group_and_rank(entries: list[MoodEntry]) -> list[MoodGroup]:
    """Group entries by mood label and rank by frequency.

    Groups with equal counts keep the order in which their label first
    appears in ``entries``.
    """
    ratings: dict[str, list[int]] = defaultdict(list)
    for entry in entries:
        label = entry.mood if entry.mood and entry.mood.strip() else UNKNOWN_GROUP
        ratings[label].append(entry.rating)

    groups = [
        MoodGroup(mood=label, count=len(values), average_rating=sum(values) / len(values))
        for label, values in ratings.items()
    ]
    # sorted() is stable, so ties stay in first-seen order
    return sorted(groups, key=lambda g: g.count, reverse=True)


def bar_length(count: int, max_count: int, max_blocks: int = MAX_BLOCKS) -> int:
    """Blocks for a group; any nonzero count gets at least one."""
    if count <= 0 or max_count <= 0:
        return 0
    return max(1, round(count / max_count * max_blocks))


def render_bar_chart(groups: list[MoodGroup], max_blocks: int = MAX_BLOCKS) -> str:
    """Fixed-width table with one bar per mood group."""
    if not groups:
        return NO_DATA

    max_count = max(g.count for g in groups)
    lines = [
        f"{'Mood':<12} | {'Frequency':>9} | {'AvgRate':>7} | Chart",
        "-" * RULE_WIDTH,
    ]
    for g in groups:
        bar = BAR_CHAR * bar_length(g.count, max_count, max_blocks)
        lines.append(f"{g.mood:<12} | {g.count:>9} | {g.average_rating:>7.1f} | {bar}")
    return "\n".join(lines)


def build_report(
    entries: list[MoodEntry],
    now: Optional[datetime] = None,
    max_blocks: int = MAX_BLOCKS,
) -> MoodReport:
    """Split entries into the three report windows."""
    now = now or datetime.now()
    return MoodReport(
        generated=now,
        weekly=filter_window(entries, WEEKLY_DAYS, now),
        monthly=filter_window(entries, MONTHLY_DAYS, now),
        overall=list(entries),
        max_blocks=max_blocks,
    )


def generate_report(
    entries: list[MoodEntry],
    now: Optional[datetime] = None,
    title: Optional[str] = None,
    max_blocks: int = MAX_BLOCKS,
) -> dict:
    """Build and render a report.

    Returns:
        {rendered_text, weekly_subset, monthly_subset, report}
    """
    report = build_report(entries, now, max_blocks=max_blocks)
    return {
        "rendered_text": report.render(title),
        "weekly_subset": report.weekly,
        "monthly_subset": report.monthly,
        "report": report,
    }


def write_report(path: str | Path, text: str) -> bool:
    """Overwrite the report file. Returns False if it couldn't be written."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
            if not text.endswith("\n"):
                f.write("\n")
    except OSError as e:
        logger.warning("report_write_failed", path=str(path), error=str(e))
        return False

    logger.info("report_written", path=str(path))
    return True
