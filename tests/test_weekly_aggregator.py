from datetime import timedelta

from fitstreak.models import ActivityType, CountToward, StrengthType
from fitstreak.services.week_window import week_window
from fitstreak.services.weekly_aggregator import aggregate
from tests.conftest import SUNDAY, TODAY


def test_only_activities_in_window_count(make_activity):
    activities = [
        make_activity(ActivityType.RUNNING, day=SUNDAY),
        make_activity(ActivityType.RUNNING, day=TODAY),
        make_activity(ActivityType.RUNNING, day=SUNDAY - timedelta(days=1)),
        make_activity(ActivityType.RUNNING, day=TODAY + timedelta(days=1)),
    ]
    week = aggregate(activities, week_window(TODAY))
    assert week.cardio.completed == 2
    assert week.total_activities == 2


def test_breakdowns(make_activity):
    activities = [
        make_activity(strength_type=StrengthType.LIFTING, subtype="Upper Body"),
        make_activity(strength_type=StrengthType.BODYWEIGHT),
        make_activity(),
        make_activity(ActivityType.RUNNING),
        make_activity(ActivityType.SPORTS, subtype="Tennis"),
        make_activity(ActivityType.OTHER, custom_category=CountToward.CARDIO),
        make_activity(ActivityType.SAUNA),
        make_activity(ActivityType.YOGA),
    ]
    week = aggregate(activities, week_window(TODAY))

    assert week.strength.breakdown == {"Lifting": 1, "Bodyweight": 1, "Other": 1}
    assert week.strength.sessions == ["Upper Body", "Strength Training", "Strength Training"]
    assert week.cardio.breakdown == {"Running": 1, "Cycle": 0, "Sports": 1, "Other": 1}
    assert week.recovery.breakdown == {"Cold Plunge": 0, "Sauna": 1, "Yoga": 1, "Pilates": 0, "Other": 0}
    assert week.workouts == 6


def test_totals_treat_missing_numbers_as_zero(make_activity):
    activities = [
        make_activity(ActivityType.RUNNING, distance=3.1, calories=300),
        make_activity(ActivityType.CYCLE, distance=10.0),
        make_activity(ActivityType.SPORTS, distance=2.0, calories=200),
        make_activity(ActivityType.OTHER),
    ]
    week = aggregate(activities, week_window(TODAY))

    assert week.total_calories == 500
    # Sports distance is not mileage
    assert round(week.total_miles, 2) == 13.1
    assert week.other_count == 1
    assert week.total_activities == 4
