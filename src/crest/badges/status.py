"""Status aggregation — reduce an event's build statuses to one label and color.

Severity order, lowest first, is both the order of fragments in the label
and the priority for the color: the most severe level present wins.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

UNKNOWN = "unknown"
DEFAULT_COLOR = "lightgrey"

SEVERITY_LEVELS: tuple[str, ...] = (
    "success",
    "queued",
    "running",
    UNKNOWN,
    "failure",
    "aborted",
)

STATUS_COLORS: dict[str, str] = {
    "success": "green",
    "queued": "blue",
    "running": "blue",
    UNKNOWN: DEFAULT_COLOR,
    "failure": "red",
    "aborted": "red",
}


@dataclass(frozen=True)
class BadgeStatus:
    """Label and color of a badge, e.g. ``("2 success, 1 failure", "red")``."""
    label: str = ""
    color: str = DEFAULT_COLOR


def pad_statuses(statuses: Iterable[str], expected: int) -> list[str]:
    """Lowercase statuses, padded with ``unknown`` up to ``expected``. Never truncates."""
    normalized = [status.lower() for status in statuses]
    missing = max(expected - len(normalized), 0)
    return normalized + [UNKNOWN] * missing


def tally_statuses(statuses: Iterable[str]) -> Counter:
    """Count each literal status. Unrecognized values are kept as-is."""
    return Counter(statuses)


def severity_counts(tally: Counter) -> dict[str, int]:
    """Fixed-key view of a tally: every severity level, zero when absent."""
    return {level: tally.get(level, 0) for level in SEVERITY_LEVELS}


def summarize(counts: dict[str, int]) -> BadgeStatus:
    parts = []
    color = DEFAULT_COLOR
    for level in SEVERITY_LEVELS:
        if counts.get(level):
            parts.append(f"{counts[level]} {level}")
            color = STATUS_COLORS[level]
    return BadgeStatus(label=", ".join(parts), color=color)


def aggregate(statuses: Iterable[str], reachable_count: int = 0) -> BadgeStatus:
    """Aggregate build statuses of one event.

    Args:
        statuses: Build statuses in trigger order, any case
        reachable_count: Number of jobs the event is expected to build;
            jobs without a build yet count as ``unknown``

    Returns:
        BadgeStatus with the per-level label and the most severe color
    """
    padded = pad_statuses(statuses, reachable_count)
    return summarize(severity_counts(tally_statuses(padded)))
