import pytest

from fitstreak.models import ActivityType, CountToward, GoalCategory
from fitstreak.services.categorizer import category, is_recovery_type


@pytest.mark.parametrize("activity_type, expected", [
    (ActivityType.STRENGTH_TRAINING, GoalCategory.STRENGTH),
    (ActivityType.RUNNING, GoalCategory.CARDIO),
    (ActivityType.CYCLE, GoalCategory.CARDIO),
    (ActivityType.SPORTS, GoalCategory.CARDIO),
    (ActivityType.YOGA, GoalCategory.RECOVERY),
    (ActivityType.PILATES, GoalCategory.RECOVERY),
    (ActivityType.COLD_PLUNGE, GoalCategory.RECOVERY),
    (ActivityType.SAUNA, GoalCategory.RECOVERY),
    (ActivityType.OTHER, GoalCategory.OTHER),
])
def test_type_defaults(make_activity, activity_type, expected):
    assert category(make_activity(activity_type)) == expected


@pytest.mark.parametrize("activity_type", list(ActivityType))
def test_count_toward_wins_for_every_type(make_activity, activity_type):
    activity = make_activity(activity_type, count_toward=CountToward.CARDIO)
    assert category(activity) == GoalCategory.CARDIO


def test_custom_category_only_applies_to_other(make_activity):
    other = make_activity(ActivityType.OTHER, custom_category=CountToward.STRENGTH)
    running = make_activity(ActivityType.RUNNING, custom_category=CountToward.STRENGTH)

    assert category(other) == GoalCategory.STRENGTH
    assert category(running) == GoalCategory.CARDIO


def test_count_toward_beats_custom_category(make_activity):
    activity = make_activity(
        ActivityType.OTHER,
        custom_category=CountToward.STRENGTH,
        count_toward=CountToward.RECOVERY,
    )
    assert category(activity) == GoalCategory.RECOVERY


def test_recovery_types(make_activity):
    assert is_recovery_type(make_activity(ActivityType.SAUNA))
    assert is_recovery_type(make_activity(ActivityType.COLD_PLUNGE, count_toward=CountToward.CARDIO))
    assert is_recovery_type(make_activity(ActivityType.YOGA))

    # Yoga logged as strength is a workout
    assert not is_recovery_type(make_activity(ActivityType.YOGA, count_toward=CountToward.STRENGTH))
    assert not is_recovery_type(make_activity(ActivityType.RUNNING))
