"""Trailing statistics over the date-ordered sequence of scored entries."""
from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal
from typing import List, Sequence

from betterme.core.models import ScoredEntry, WarningTotals


def round_half_up(value: float, digits: int = 1) -> float:
    """Round halves toward positive infinity (0.25 -> 0.3, -0.25 -> -0.2).

    Not banker's rounding, and not away from zero for negative halves.
    """

    quantum = Decimal(1).scaleb(-digits)
    rounding = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
    return float(Decimal(str(value)).quantize(quantum, rounding=rounding))


def rolling_avg(values: Sequence[float], window_size: int) -> List[float]:
    """Trailing mean at each index; the window narrows near the start.

    Window sizes below 1 are treated as 1.
    """

    window_size = max(1, window_size)
    averages: List[float] = []
    for index in range(len(values)):
        window = values[max(0, index - window_size + 1):index + 1]
        averages.append(round_half_up(sum(window) / len(window)))
    return averages


def is_consecutive_dates(previous: str, current: str) -> bool:
    """True when ``current`` is exactly one calendar day after ``previous``."""

    try:
        return (date.fromisoformat(current) - date.fromisoformat(previous)).days == 1
    except ValueError:
        return False


def calc_streak(dates: Sequence[str]) -> int:
    """Count consecutive days ending at the last date."""

    if not dates:
        return 0

    streak = 1
    for index in range(len(dates) - 1, 0, -1):
        if not is_consecutive_dates(dates[index - 1], dates[index]):
            break
        streak += 1
    return streak


def warning_totals(entries: Sequence[ScoredEntry], window: int = 14) -> WarningTotals:
    """Sum each warning flag over the last ``window`` entries."""

    recent = list(entries)[-window:] if window > 0 else []
    return WarningTotals(
        low_sleep=sum(scored.flags.low_sleep for scored in recent),
        low_deep=sum(scored.flags.low_deep for scored in recent),
        escalation=sum(scored.flags.escalation for scored in recent),
        impulse=sum(scored.flags.impulse for scored in recent),
        window=len(recent),
    )
