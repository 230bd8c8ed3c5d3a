import logging
import math
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from fitstreak.config import settings
from fitstreak.models.activity import Activity, ActivityType, GoalCategory
from fitstreak.schemas.progress import WeeklyAggregate
from fitstreak.schemas.records import PersonalRecords, RecordBroken, RecordEntry
from fitstreak.services.categorizer import category, is_recovery_type

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    HIGHER = "higher"
    LOWER = "lower"


class MetricKind(str, Enum):
    SINGLE = "single"
    WEEKLY = "weekly"
    STREAK = "streak"


# metric name -> (kind, better direction)
METRICS: Dict[str, tuple] = {
    "highest_calories": (MetricKind.SINGLE, Direction.HIGHER),
    "longest_workout": (MetricKind.SINGLE, Direction.HIGHER),
    "longest_strength_duration": (MetricKind.SINGLE, Direction.HIGHER),
    "longest_cardio_duration": (MetricKind.SINGLE, Direction.HIGHER),
    "longest_distance": (MetricKind.SINGLE, Direction.HIGHER),
    "fastest_running_pace": (MetricKind.SINGLE, Direction.LOWER),
    "fastest_cycling_pace": (MetricKind.SINGLE, Direction.LOWER),
    "most_workouts_in_week": (MetricKind.WEEKLY, Direction.HIGHER),
    "most_calories_in_week": (MetricKind.WEEKLY, Direction.HIGHER),
    "most_miles_in_week": (MetricKind.WEEKLY, Direction.HIGHER),
    "longest_master_streak": (MetricKind.STREAK, Direction.HIGHER),
    "longest_strength_streak": (MetricKind.STREAK, Direction.HIGHER),
    "longest_cardio_streak": (MetricKind.STREAK, Direction.HIGHER),
    "longest_recovery_streak": (MetricKind.STREAK, Direction.HIGHER),
}

SINGLE_METRICS = [name for name, (kind, _) in METRICS.items() if kind == MetricKind.SINGLE]


def direction_of(metric: str) -> Direction:
    return METRICS[metric][1]


def is_better(metric: str, candidate: Optional[float], current: Optional[float]) -> bool:
    """Strict improvement of ``candidate`` over ``current`` for a metric.

    An unset higher-is-better record behaves as 0, so zero never sets it.
    """
    if candidate is None:
        return False
    if direction_of(metric) == Direction.LOWER:
        return current is None or candidate < current
    return candidate > (current or 0)


def format_duration(minutes: float) -> str:
    total = int(round(minutes))
    hours, mins = divmod(total, 60)
    return f"{hours}h {mins}m" if hours > 0 else f"{mins} min"


def format_pace(pace: float) -> str:
    mins, secs = divmod(int(round(pace * 60)), 60)
    return f"{mins}:{secs:02d}"


# ----------------------------------------------------------------------------
# Single activity candidates
# ----------------------------------------------------------------------------

def _positive(value) -> Optional[float]:
    if value is None:
        return None
    value = float(value)
    return value if value > 0 else None


def pace(activity: Activity) -> Optional[float]:
    """Minutes per mile, or None when the activity can't give a plausible pace"""
    distance = float(activity.distance or 0)
    duration = float(activity.duration or 0)
    if distance < settings.MIN_PACE_DISTANCE or duration <= 0:
        return None

    value = duration / distance
    if not settings.PACE_MIN <= value <= settings.PACE_MAX:
        logger.debug("Ignoring implausible pace %.2f min/mi for activity %s", value, activity.id)
        return None
    return value


def _workout_duration(activity: Activity, required: Optional[GoalCategory] = None) -> Optional[float]:
    if is_recovery_type(activity):
        return None
    if required is not None and category(activity) != required:
        return None
    return _positive(activity.duration)


def _distance(activity: Activity) -> Optional[float]:
    if is_recovery_type(activity):
        return None
    return _positive(activity.distance)


def _typed_pace(activity_type: ActivityType) -> Callable[[Activity], Optional[float]]:
    def candidate(activity: Activity) -> Optional[float]:
        if activity.type != activity_type or is_recovery_type(activity):
            return None
        return pace(activity)
    return candidate


CANDIDATES: Dict[str, Callable[[Activity], Optional[float]]] = {
    "highest_calories": lambda a: _positive(a.calories),
    "longest_workout": lambda a: _workout_duration(a),
    "longest_strength_duration": lambda a: _workout_duration(a, GoalCategory.STRENGTH),
    "longest_cardio_duration": lambda a: _workout_duration(a, GoalCategory.CARDIO),
    "longest_distance": _distance,
    "fastest_running_pace": _typed_pace(ActivityType.RUNNING),
    "fastest_cycling_pace": _typed_pace(ActivityType.CYCLE),
}


def _single_message(metric: str, value: float, activity: Activity) -> str:
    activity_type = ActivityType(activity.type).value
    if metric == "highest_calories":
        return f"{int(value)} cals ({activity_type}) 🔥"
    if metric == "longest_workout":
        return f"{format_duration(value)} workout ({activity_type}) 💪"
    if metric == "longest_strength_duration":
        return f"{format_duration(value)} strength 🏋️"
    if metric == "longest_cardio_duration":
        return f"{format_duration(value)} cardio ({activity_type}) 🏃"
    if metric == "longest_distance":
        return f"{value:g} mi ({activity_type}) 🏃"
    if metric == "fastest_running_pace":
        return f"{format_pace(value)}/mi run pace ⚡"
    return f"{format_pace(value)}/mi cycle pace 🚴"


class RecordTracker:
    """Owns the personal record table and decides which records an activity breaks"""

    def __init__(self, records: Optional[PersonalRecords] = None):
        self.records = records if records is not None else PersonalRecords()

    # ------------------------------------------------------------------
    # Add
    # ------------------------------------------------------------------

    def on_activity_added(self, activity: Activity, new_aggregate: WeeklyAggregate) -> List[RecordBroken]:
        """Update every record the new activity (and its week) improves"""
        broken = self._check_single(activity)
        broken.extend(self._check_weekly(new_aggregate))
        return broken

    def _check_single(self, activity: Activity) -> List[RecordBroken]:
        broken = []
        longest_workout_broken = False

        for metric in SINGLE_METRICS:
            candidate = CANDIDATES[metric](activity)
            current = self.records.get(metric)
            if not is_better(metric, candidate, current.value):
                continue

            self._update(metric, RecordEntry(value=candidate, activity_type=activity.type))
            if metric == "longest_workout":
                longest_workout_broken = True

            # The overall duration record already names this session
            announce = not (
                longest_workout_broken
                and metric in ("longest_strength_duration", "longest_cardio_duration")
            )
            broken.append(RecordBroken(
                metric=metric,
                value=candidate,
                previous=current.value,
                activity_type=activity.type,
                message=_single_message(metric, candidate, activity),
                announce=announce,
            ))

        return broken

    def _check_weekly(self, aggregate: WeeklyAggregate, announce: bool = True) -> List[RecordBroken]:
        broken = []

        workouts = aggregate.workouts
        previous = self.records.most_workouts_in_week.value
        if is_better("most_workouts_in_week", workouts, previous):
            self._update("most_workouts_in_week", RecordEntry(value=workouts))
            broken.append(RecordBroken(
                metric="most_workouts_in_week",
                value=workouts,
                previous=previous,
                message=f"{workouts} workouts this week 🎯",
                announce=announce and workouts >= 5 and workouts % 5 == 0,
            ))

        calories = aggregate.total_calories
        previous = self.records.most_calories_in_week.value
        if is_better("most_calories_in_week", calories, previous):
            self._update("most_calories_in_week", RecordEntry(value=calories))
            broken.append(RecordBroken(
                metric="most_calories_in_week",
                value=calories,
                previous=previous,
                message=f"{calories} cals this week 🔥",
                announce=False,
            ))

        miles = aggregate.total_miles
        previous = self.records.most_miles_in_week.value
        if is_better("most_miles_in_week", miles, previous):
            self._update("most_miles_in_week", RecordEntry(value=miles))
            # Only a new 10-mile band is worth a notification
            crossed_band = math.floor(miles / 10) > math.floor((previous or 0) / 10)
            broken.append(RecordBroken(
                metric="most_miles_in_week",
                value=miles,
                previous=previous,
                message=f"{math.floor(miles)} mi this week 🏆",
                announce=announce and miles >= 10 and crossed_band,
            ))

        return broken

    # ------------------------------------------------------------------
    # Remove / edit
    # ------------------------------------------------------------------

    def on_activity_removed(self, remaining_activities: Iterable[Activity]):
        """Recompute every single-activity record from the remaining history.

        Weekly and streak records describe past peaks and are kept.
        """
        self._rescan(list(remaining_activities))

    def on_activity_updated(self, activities: Iterable[Activity], aggregate: WeeklyAggregate) -> List[RecordBroken]:
        """Re-derive records after an edit; nothing is announced for edits"""
        activities = list(activities)
        self._rescan(activities)
        return self._check_weekly(aggregate, announce=False)

    def _rescan(self, activities: List[Activity]):
        for metric in SINGLE_METRICS:
            best = RecordEntry()
            for activity in activities:
                candidate = CANDIDATES[metric](activity)
                if is_better(metric, candidate, best.value):
                    best = RecordEntry(value=candidate, activity_type=activity.type)

            if best != self.records.get(metric):
                logger.info(
                    "Record %s recomputed: %s -> %s",
                    metric, self.records.get(metric).value, best.value,
                )
                self.records.set(metric, best)

    # ------------------------------------------------------------------
    # Streaks
    # ------------------------------------------------------------------

    def offer_streak(self, streak: str, value: int) -> bool:
        """Record a streak length if it beats the longest one; returns True on a new record"""
        metric = f"longest_{streak}_streak"
        if not is_better(metric, value, self.records.get(metric).value):
            return False
        self._update(metric, RecordEntry(value=value))
        return True

    def _update(self, metric: str, entry: RecordEntry):
        logger.info("New personal record %s: %s -> %s", metric, self.records.get(metric).value, entry.value)
        self.records.set(metric, entry)
