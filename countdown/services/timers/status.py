"""Pure remaining-time and progress computation.

Everything here is a function of (baseline, anchor, now); nothing touches
the database. The engine folds elapsed time into the baseline only on
pause, and every read derives the live value from these helpers.
"""

import math
from datetime import datetime
from typing import Optional


def elapsed_seconds(anchor_time: datetime, now: datetime) -> int:
    """Whole seconds between ``anchor_time`` and ``now``, floored.

    A ``now`` earlier than the anchor counts as zero elapsed.
    """
    return max(0, math.floor((now - anchor_time).total_seconds()))


def live_remaining(baseline_seconds: int, is_running: bool, anchor_time: Optional[datetime], now: datetime) -> int:
    if not is_running or anchor_time is None:
        return max(0, baseline_seconds)
    return max(0, baseline_seconds - elapsed_seconds(anchor_time, now))


def progress_percentage(original_duration_seconds: int, remaining_seconds: int) -> float:
    if original_duration_seconds <= 0:
        return 100.0
    pct = 100.0 * (original_duration_seconds - remaining_seconds) / original_duration_seconds
    pct = min(100.0, max(0.0, pct))
    return round(pct, 2)


def status_of(timer, now: datetime) -> dict:
    """Build the status payload for a loaded ``Timer`` row."""
    remaining = live_remaining(timer.baseline_seconds, timer.is_running, timer.anchor_time, now)
    return {
        'id': timer.id,
        'remaining_seconds': remaining,
        'is_running': timer.is_running,
        'is_finished': remaining == 0,
        'progress_percentage': progress_percentage(timer.original_duration_seconds, remaining),
    }
