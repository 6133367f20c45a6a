"""Daily wellbeing score: four 25-point pillars summing to 100.

Each pillar mixes a banded measurement (sleep, steps, kids time, deep work)
with yes/no indicators worth a fixed number of points:

  health   = sleep + steps + strength*4 + protein*3 + calories*4
  family   = kids + proactive*5 + follow_through*5 + no_escalation*5
  wealth   = no_impulse*8 + tracked_spending*5 + invest*7 + skill20*5
  creation = deep_work + shipped*7 + build_artifact*5 + tomorrow_one_sentence*3

Indicators are expected to be 0 or 1 and are multiplied as given.
"""

from typing import Dict, Iterable, List, Tuple

from betterme.core.models import LogEntry, PillarScores, ScoredEntry, WarningFlags


# ============================================================
# Band tables (evaluated top-down, first match wins, else 0)
# ============================================================

# (low, high, high_inclusive, points); low is always inclusive.
SLEEP_BANDS: Tuple[Tuple[float, float, bool, int], ...] = (
    (7.0, 8.5, True, 8),
    (6.0, 7.0, False, 6),
    (5.0, 6.0, False, 3),
)

# (minimum, points)
STEPS_THRESHOLDS: Tuple[Tuple[float, int], ...] = ((10000, 6), (7000, 4), (4000, 2))
KIDS_THRESHOLDS: Tuple[Tuple[float, int], ...] = ((60, 10), (30, 7), (15, 4), (1, 2))
DEEP_WORK_THRESHOLDS: Tuple[Tuple[float, int], ...] = ((120, 10), (60, 7), (30, 4), (1, 2))


# ============================================================
# Indicator weights per pillar
# ============================================================

HEALTH_WEIGHTS: Dict[str, int] = {"strength": 4, "protein": 3, "calories": 4}
FAMILY_WEIGHTS: Dict[str, int] = {"proactive": 5, "follow_through": 5, "no_escalation": 5}
WEALTH_WEIGHTS: Dict[str, int] = {
    "no_impulse": 8,
    "tracked_spending": 5,
    "invest": 7,
    "skill20": 5,
}
CREATION_WEIGHTS: Dict[str, int] = {"shipped": 7, "build_artifact": 5, "tomorrow_one_sentence": 3}

PILLAR_MAX = 25
LOW_SLEEP_HOURS = 6
LOW_DEEP_WORK_MINUTES = 30


def _threshold_points(value: float, thresholds: Tuple[Tuple[float, int], ...]) -> int:
    for minimum, points in thresholds:
        if value >= minimum:
            return points
    return 0


def sleep_pts(hours: float) -> int:
    for low, high, high_inclusive, points in SLEEP_BANDS:
        below_high = hours <= high if high_inclusive else hours < high
        if hours >= low and below_high:
            return points
    return 0


def steps_pts(steps: float) -> int:
    return _threshold_points(steps, STEPS_THRESHOLDS)


def kids_pts(minutes: float) -> int:
    return _threshold_points(minutes, KIDS_THRESHOLDS)


def deep_pts(minutes: float) -> int:
    return _threshold_points(minutes, DEEP_WORK_THRESHOLDS)


def _weighted(entry: LogEntry, weights: Dict[str, int]) -> float:
    return sum(getattr(entry, attr) * weight for attr, weight in weights.items())


def pillar_scores(entry: LogEntry) -> PillarScores:
    return PillarScores(
        health=sleep_pts(entry.sleep_hours) + steps_pts(entry.steps) + _weighted(entry, HEALTH_WEIGHTS),
        family=kids_pts(entry.kids_minutes) + _weighted(entry, FAMILY_WEIGHTS),
        wealth=_weighted(entry, WEALTH_WEIGHTS),
        creation=deep_pts(entry.deep_work_minutes) + _weighted(entry, CREATION_WEIGHTS),
    )


def warning_flags(entry: LogEntry) -> WarningFlags:
    return WarningFlags(
        low_sleep=int(entry.sleep_hours < LOW_SLEEP_HOURS),
        low_deep=int(entry.deep_work_minutes < LOW_DEEP_WORK_MINUTES),
        escalation=int(entry.no_escalation == 0),
        impulse=int(entry.no_impulse == 0),
    )


def compute_scores(entry: LogEntry) -> ScoredEntry:
    """Score a single entry. Depends on nothing but the entry's own fields."""

    return ScoredEntry(entry=entry, scores=pillar_scores(entry), flags=warning_flags(entry))


def score_entries(entries: Iterable[LogEntry]) -> List[ScoredEntry]:
    return [compute_scores(entry) for entry in entries]
