from typing import Iterable

from fitstreak.models.activity import Activity, ActivityType, GoalCategory, StrengthType
from fitstreak.schemas.progress import CategoryTally, WeekWindow, WeeklyAggregate
from fitstreak.services.categorizer import category
from fitstreak.services.week_window import to_local_date

OTHER_BUCKET = "Other"

CARDIO_BUCKETS = (ActivityType.RUNNING, ActivityType.CYCLE, ActivityType.SPORTS)
RECOVERY_BUCKETS = (ActivityType.COLD_PLUNGE, ActivityType.SAUNA, ActivityType.YOGA, ActivityType.PILATES)
STRENGTH_BUCKETS = (StrengthType.LIFTING.value, StrengthType.BODYWEIGHT.value)

# Activity types whose distance counts toward weekly miles
MILEAGE_TYPES = (ActivityType.RUNNING, ActivityType.CYCLE)


def in_window(activity: Activity, window: WeekWindow) -> bool:
    if not activity.date:
        return False
    return window.contains(to_local_date(activity.date))


def _empty_tally(buckets) -> CategoryTally:
    names = [b.value if isinstance(b, ActivityType) else b for b in buckets]
    return CategoryTally(breakdown={name: 0 for name in names + [OTHER_BUCKET]})


def _bucket(activity: Activity, goal_category: GoalCategory) -> str:
    if goal_category == GoalCategory.STRENGTH:
        if activity.strength_type:
            return StrengthType(activity.strength_type).value
        return OTHER_BUCKET
    buckets = CARDIO_BUCKETS if goal_category == GoalCategory.CARDIO else RECOVERY_BUCKETS
    if activity.type in buckets:
        return ActivityType(activity.type).value
    return OTHER_BUCKET


def _session_label(activity: Activity, goal_category: GoalCategory) -> str:
    activity_type = ActivityType(activity.type).value
    if goal_category == GoalCategory.STRENGTH:
        return activity.subtype or activity_type
    return activity_type


def aggregate(activities: Iterable[Activity], window: WeekWindow) -> WeeklyAggregate:
    """Reduce the activities that fall inside ``window`` to per-category counts and totals"""
    result = WeeklyAggregate(
        window=window,
        strength=_empty_tally(STRENGTH_BUCKETS),
        cardio=_empty_tally(CARDIO_BUCKETS),
        recovery=_empty_tally(RECOVERY_BUCKETS),
    )

    for activity in activities:
        if not in_window(activity, window):
            continue

        result.total_activities += 1
        result.total_calories += int(activity.calories or 0)
        if activity.type in MILEAGE_TYPES:
            result.total_miles += float(activity.distance or 0)

        goal_category = category(activity)
        tally = result.tally(goal_category)
        if tally is None:
            result.other_count += 1
            continue

        tally.completed += 1
        bucket = _bucket(activity, goal_category)
        tally.breakdown[bucket] = tally.breakdown.get(bucket, 0) + 1
        tally.sessions.append(_session_label(activity, goal_category))

    return result
