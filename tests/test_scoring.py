"""Pillar scoring with fixed band tables and indicator weights."""
import pytest

from betterme.core.models import COLUMN_FIELDS, LogEntry
from betterme.processing.scoring import (
    compute_scores,
    deep_pts,
    kids_pts,
    score_entries,
    sleep_pts,
    steps_pts,
)


def _perfect_entry(**overrides) -> LogEntry:
    values = {attr: 1.0 for attr in COLUMN_FIELDS.values()}
    values.update(sleep_hours=8.0, steps=10000, kids_minutes=60, deep_work_minutes=120)
    values.update(overrides)
    return LogEntry(date="2026-01-01", **values)


@pytest.mark.parametrize(
    "hours, points",
    [
        (4.9, 0),
        (5.0, 3),
        (5.9, 3),
        (6.0, 6),
        (6.9, 6),
        (7.0, 8),
        (8.5, 8),
        (8.6, 0),
        (12, 0),
    ],
)
def test_sleep_band_boundaries(hours, points):
    # 6.9 vs 7.0 guards the half-open [6, 7) band; 8.5 vs 8.6 the closed top band.
    assert sleep_pts(hours) == points


@pytest.mark.parametrize("steps, points", [(0, 0), (3999, 0), (4000, 2), (6999, 2), (7000, 4), (9999, 4), (10000, 6)])
def test_steps_bands(steps, points):
    assert steps_pts(steps) == points


@pytest.mark.parametrize("minutes, points", [(0, 0), (0.5, 0), (1, 2), (14, 2), (15, 4), (30, 7), (59, 7), (60, 10)])
def test_kids_bands(minutes, points):
    assert kids_pts(minutes) == points


@pytest.mark.parametrize("minutes, points", [(0, 0), (1, 2), (29, 2), (30, 4), (60, 7), (119, 7), (120, 10), (500, 10)])
def test_deep_work_bands(minutes, points):
    assert deep_pts(minutes) == points


def test_perfect_day_scores_full_marks():
    scored = compute_scores(_perfect_entry())

    assert scored.scores.health == 25
    assert scored.scores.family == 25
    assert scored.scores.wealth == 25
    assert scored.scores.creation == 25
    assert scored.total == 100
    assert scored.flags.low_sleep == 0
    assert scored.flags.low_deep == 0
    assert scored.flags.escalation == 0
    assert scored.flags.impulse == 0


def test_empty_day_scores_zero_and_raises_every_flag():
    scored = compute_scores(LogEntry(date="2026-01-01"))

    assert scored.total == 0
    assert (scored.flags.low_sleep, scored.flags.low_deep, scored.flags.escalation, scored.flags.impulse) == (1, 1, 1, 1)


def test_indicator_weights_per_pillar():
    entry = LogEntry(
        date="2026-01-01",
        protein=1,
        follow_through=1,
        invest=1,
        tomorrow_one_sentence=1,
    )
    scored = compute_scores(entry)

    assert scored.scores.health == 3
    assert scored.scores.family == 5
    assert scored.scores.wealth == 7
    assert scored.scores.creation == 3
    assert scored.total == 18


def test_indicators_are_multiplied_without_clamping():
    scored = compute_scores(LogEntry(date="2026-01-01", shipped=2))
    assert scored.scores.creation == 14


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"sleep_hours": 5.5, "steps": 4100, "strength": 0},
        {"kids_minutes": 20, "proactive": 0, "no_escalation": 0},
        {"no_impulse": 0, "invest": 0, "deep_work_minutes": 45, "shipped": 0},
    ],
)
def test_pillars_stay_in_range_and_sum_to_total(overrides):
    scores = compute_scores(_perfect_entry(**overrides)).scores

    for pillar in (scores.health, scores.family, scores.wealth, scores.creation):
        assert 0 <= pillar <= 25
    assert scores.total == scores.health + scores.family + scores.wealth + scores.creation


def test_flags_thresholds():
    scored = compute_scores(_perfect_entry(sleep_hours=5.99, deep_work_minutes=29.5, no_escalation=0))
    assert scored.flags.low_sleep == 1
    assert scored.flags.low_deep == 1
    assert scored.flags.escalation == 1
    assert scored.flags.impulse == 0

    boundary = compute_scores(_perfect_entry(sleep_hours=6, deep_work_minutes=30))
    assert boundary.flags.low_sleep == 0
    assert boundary.flags.low_deep == 0


def test_scoring_is_independent_of_position():
    entry = _perfect_entry(sleep_hours=6.5)
    first = score_entries([entry, LogEntry(date="2026-01-02")])[0]
    second = score_entries([LogEntry(date="2025-12-31"), entry])[1]
    assert first == second
