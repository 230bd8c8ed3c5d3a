"""Goal category of a logged activity.

This is the only place the category rules live; aggregation, streaks and
record eligibility all go through :func:`category`.
"""

from fitstreak.models.activity import Activity, ActivityType, CountToward, GoalCategory

COUNT_TOWARD_CATEGORY = {
    CountToward.STRENGTH: GoalCategory.STRENGTH,
    CountToward.CARDIO: GoalCategory.CARDIO,
    CountToward.RECOVERY: GoalCategory.RECOVERY,
}

TYPE_DEFAULT_CATEGORY = {
    ActivityType.STRENGTH_TRAINING: GoalCategory.STRENGTH,
    ActivityType.RUNNING: GoalCategory.CARDIO,
    ActivityType.CYCLE: GoalCategory.CARDIO,
    ActivityType.SPORTS: GoalCategory.CARDIO,
    ActivityType.COLD_PLUNGE: GoalCategory.RECOVERY,
    ActivityType.SAUNA: GoalCategory.RECOVERY,
    ActivityType.YOGA: GoalCategory.RECOVERY,
    ActivityType.PILATES: GoalCategory.RECOVERY,
    ActivityType.OTHER: GoalCategory.OTHER,
}

# Always recovery sessions, whatever they were counted toward
RECOVERY_ONLY_TYPES = (ActivityType.COLD_PLUNGE, ActivityType.SAUNA)

# Count as recovery unless logged toward another goal
HYBRID_TYPES = (ActivityType.YOGA, ActivityType.PILATES)


def category(activity: Activity) -> GoalCategory:
    """Return the goal category an activity counts toward.

    Precedence: ``count_toward`` override, then ``custom_category`` for
    ``Other`` activities, then the default for the activity type.
    """
    if activity.count_toward:
        return COUNT_TOWARD_CATEGORY[CountToward(activity.count_toward)]

    if activity.type == ActivityType.OTHER and activity.custom_category:
        return COUNT_TOWARD_CATEGORY[CountToward(activity.custom_category)]

    return TYPE_DEFAULT_CATEGORY.get(ActivityType(activity.type), GoalCategory.OTHER)


def is_recovery_type(activity: Activity) -> bool:
    """Recovery sessions are kept out of every workout record except calories"""
    if activity.type in RECOVERY_ONLY_TYPES:
        return True
    return activity.type in HYBRID_TYPES and category(activity) == GoalCategory.RECOVERY
