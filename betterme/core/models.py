"""Value objects passed between the parsing, scoring, and rendering stages."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


# Sheet column -> LogEntry attribute for every column the scoring engine reads.
COLUMN_FIELDS: Dict[str, str] = {
    "SleepHours": "sleep_hours",
    "Steps": "steps",
    "KidsMinutes": "kids_minutes",
    "DeepWorkMinutes": "deep_work_minutes",
    "StrengthYN": "strength",
    "ProteinYN": "protein",
    "CaloriesYN": "calories",
    "ProactiveYN": "proactive",
    "FollowThroughYN": "follow_through",
    "NoEscalationYN": "no_escalation",
    "NoImpulseYN": "no_impulse",
    "TrackedSpendingYN": "tracked_spending",
    "InvestYN": "invest",
    "Skill20YN": "skill20",
    "ShippedYN": "shipped",
    "BuildArtifactYN": "build_artifact",
    "TomorrowOneSentenceYN": "tomorrow_one_sentence",
}

EMPTY_NO_DATA = "no_data"
EMPTY_NO_USABLE_ROWS = "no_usable_rows"


@dataclass(frozen=True)
class LogEntry:
    """One dated row of the daily log with its known columns coerced to numbers.

    Columns the scoring engine does not read are kept verbatim in ``extras`` so
    the dashboard can still show them.
    """

    date: str
    sleep_hours: float = 0.0
    steps: float = 0.0
    kids_minutes: float = 0.0
    deep_work_minutes: float = 0.0
    strength: float = 0.0
    protein: float = 0.0
    calories: float = 0.0
    proactive: float = 0.0
    follow_through: float = 0.0
    no_escalation: float = 0.0
    no_impulse: float = 0.0
    tracked_spending: float = 0.0
    invest: float = 0.0
    skill20: float = 0.0
    shipped: float = 0.0
    build_artifact: float = 0.0
    tomorrow_one_sentence: float = 0.0
    extras: Dict[str, str] = field(default_factory=dict)

    def column_values(self) -> Dict[str, float]:
        """Return the known columns keyed by their sheet header."""

        return {column: getattr(self, attr) for column, attr in COLUMN_FIELDS.items()}


@dataclass(frozen=True)
class PillarScores:
    health: float = 0.0
    family: float = 0.0
    wealth: float = 0.0
    creation: float = 0.0

    @property
    def total(self) -> float:
        return self.health + self.family + self.wealth + self.creation


@dataclass(frozen=True)
class WarningFlags:
    low_sleep: int = 0
    low_deep: int = 0
    escalation: int = 0
    impulse: int = 0


@dataclass(frozen=True)
class ScoredEntry:
    """A log entry together with its pillar scores and warning flags."""

    entry: LogEntry
    scores: PillarScores
    flags: WarningFlags

    @property
    def date(self) -> str:
        return self.entry.date

    @property
    def total(self) -> float:
        return self.scores.total

    def to_dict(self) -> Dict[str, Any]:
        """Return a flat row keyed by sheet column names plus derived fields."""

        row: Dict[str, Any] = dict(self.entry.extras)
        row["Date"] = self.entry.date
        row.update(self.entry.column_values())
        row.update(
            {
                "total": self.scores.total,
                "health": self.scores.health,
                "family": self.scores.family,
                "wealth": self.scores.wealth,
                "creation": self.scores.creation,
                "lowSleep": self.flags.low_sleep,
                "lowDeep": self.flags.low_deep,
                "escalation": self.flags.escalation,
                "impulse": self.flags.impulse,
            }
        )
        return row


@dataclass(frozen=True)
class WarningTotals:
    """Flag counts summed across the trailing window."""

    low_sleep: int = 0
    low_deep: int = 0
    escalation: int = 0
    impulse: int = 0
    window: int = 0


@dataclass(frozen=True)
class DashboardResult:
    """Everything the presentation layer needs from one pipeline run."""

    entries: Tuple[ScoredEntry, ...] = ()
    rolling_average: Tuple[float, ...] = ()
    streak: int = 0
    warnings: WarningTotals = field(default_factory=WarningTotals)
    row_count: int = 0
    dropped_count: int = 0
    empty_reason: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def latest(self) -> Optional[ScoredEntry]:
        return self.entries[-1] if self.entries else None

    @property
    def latest_average(self) -> Optional[float]:
        return self.rolling_average[-1] if self.rolling_average else None

    @property
    def dates(self) -> Tuple[str, ...]:
        return tuple(scored.date for scored in self.entries)

    @property
    def totals(self) -> Tuple[float, ...]:
        return tuple(scored.total for scored in self.entries)
