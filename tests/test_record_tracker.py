import pytest

from fitstreak.models import ActivityType, CountToward
from fitstreak.schemas import PersonalRecords, RecordEntry
from fitstreak.services.record_tracker import RecordTracker, format_duration, format_pace, is_better, pace
from fitstreak.services.week_window import week_window
from fitstreak.services.weekly_aggregator import aggregate
from tests.conftest import TODAY


def _tracker(**entries):
    records = PersonalRecords()
    for metric, value in entries.items():
        records.set(metric, RecordEntry(value=value, activity_type=ActivityType.RUNNING))
    return RecordTracker(records)


def _added(tracker, activity, history=()):
    week = aggregate(list(history) + [activity], week_window(TODAY))
    return {r.metric: r for r in tracker.on_activity_added(activity, week)}


def test_faster_run_sets_pace_record(make_activity):
    tracker = _tracker(fastest_running_pace=8.5)
    broken = _added(tracker, make_activity(ActivityType.RUNNING, distance=5, duration=40))

    assert tracker.records.fastest_running_pace == RecordEntry(value=8.0, activity_type=ActivityType.RUNNING)
    assert broken["fastest_running_pace"].previous == 8.5
    assert broken["fastest_running_pace"].message == "8:00/mi run pace ⚡"


def test_short_distance_has_no_pace(make_activity):
    tracker = _tracker(fastest_running_pace=8.5)
    broken = _added(tracker, make_activity(ActivityType.RUNNING, distance=0.05, duration=1))

    assert "fastest_running_pace" not in broken
    assert tracker.records.fastest_running_pace.value == 8.5


def test_implausible_pace_is_ignored(make_activity):
    assert pace(make_activity(ActivityType.RUNNING, distance=1, duration=2)) is None
    assert pace(make_activity(ActivityType.CYCLE, distance=1, duration=45)) is None
    assert pace(make_activity(ActivityType.CYCLE, distance=20, duration=60)) == 3.0


def test_slower_or_equal_pace_is_not_a_record(make_activity):
    tracker = _tracker(fastest_running_pace=8.0)
    broken = _added(tracker, make_activity(ActivityType.RUNNING, distance=5, duration=40))
    assert "fastest_running_pace" not in broken


@pytest.mark.parametrize("metric, candidate, current, expected", [
    ("highest_calories", 500, 500, False),
    ("highest_calories", 501, 500, True),
    ("highest_calories", 0, None, False),
    ("fastest_running_pace", 8.0, 8.0, False),
    ("fastest_running_pace", 7.9, 8.0, True),
    ("fastest_running_pace", 9.0, None, True),
    ("longest_distance", None, None, False),
])
def test_strict_improvement(metric, candidate, current, expected):
    assert is_better(metric, candidate, current) is expected


def test_recovery_only_counts_toward_calories(make_activity):
    tracker = RecordTracker()
    broken = _added(tracker, make_activity(ActivityType.SAUNA, duration=60, calories=300))

    assert set(broken) == {"highest_calories", "most_calories_in_week"}
    assert not tracker.records.longest_workout.is_set


def test_yoga_counted_as_strength_is_a_workout(make_activity):
    tracker = RecordTracker()
    _added(tracker, make_activity(ActivityType.YOGA, duration=50, count_toward=CountToward.STRENGTH))
    assert tracker.records.longest_strength_duration.value == 50


def test_category_duration_not_announced_with_longest_workout(make_activity):
    tracker = _tracker(longest_workout=90, longest_strength_duration=40)
    broken = _added(tracker, make_activity(duration=60))

    assert broken["longest_strength_duration"].value == 60
    assert broken["longest_strength_duration"].announce
    assert "longest_workout" not in broken

    broken = _added(tracker, make_activity(duration=120))
    assert broken["longest_workout"].announce
    assert broken["longest_workout"].message == "2h 0m workout (Strength Training) 💪"
    assert not broken["longest_strength_duration"].announce


def test_weekly_workouts_announced_at_multiples_of_five(make_activity):
    tracker = _tracker(most_workouts_in_week=3)
    history = [make_activity() for _ in range(3)]

    broken = _added(tracker, make_activity(), history)
    assert broken["most_workouts_in_week"].value == 4
    assert not broken["most_workouts_in_week"].announce

    history.append(make_activity())
    broken = _added(tracker, make_activity(), history)
    assert broken["most_workouts_in_week"].announce
    assert broken["most_workouts_in_week"].message == "5 workouts this week 🎯"


def test_weekly_miles_announced_on_new_ten_mile_band(make_activity):
    tracker = _tracker(most_miles_in_week=9.5)
    history = [make_activity(ActivityType.RUNNING, distance=6)]

    broken = _added(tracker, make_activity(ActivityType.RUNNING, distance=6), history)
    assert broken["most_miles_in_week"].announce
    assert broken["most_miles_in_week"].message == "12 mi this week 🏆"

    history.append(make_activity(ActivityType.RUNNING, distance=6))
    broken = _added(tracker, make_activity(ActivityType.RUNNING, distance=3), history)
    assert broken["most_miles_in_week"].value == 15
    assert not broken["most_miles_in_week"].announce


def test_weekly_calories_are_silent(make_activity):
    tracker = RecordTracker()
    broken = _added(tracker, make_activity(ActivityType.SAUNA, calories=200))
    assert broken["most_calories_in_week"].value == 200
    assert not broken["most_calories_in_week"].announce


def test_removing_calorie_record_falls_back_to_next_best(make_activity):
    best = make_activity(ActivityType.RUNNING, calories=800)
    runner_up = make_activity(ActivityType.CYCLE, calories=650)
    tracker = RecordTracker()
    for activity in (runner_up, best):
        _added(tracker, activity)
    assert tracker.records.highest_calories.value == 800

    tracker.on_activity_removed([runner_up])
    assert tracker.records.highest_calories == RecordEntry(value=650, activity_type=ActivityType.CYCLE)


def test_removing_longest_distance(make_activity):
    far = make_activity(ActivityType.RUNNING, distance=13.1)
    near = make_activity(ActivityType.CYCLE, distance=8)
    plunge = make_activity(ActivityType.COLD_PLUNGE, distance=20)
    tracker = RecordTracker()
    for activity in (far, near, plunge):
        _added(tracker, activity)
    assert tracker.records.longest_distance.value == 13.1

    tracker.on_activity_removed([near, plunge])
    assert tracker.records.longest_distance == RecordEntry(value=8, activity_type=ActivityType.CYCLE)

    tracker.on_activity_removed([plunge])
    assert not tracker.records.longest_distance.is_set


def test_removal_keeps_weekly_and_streak_records(make_activity):
    tracker = _tracker(most_workouts_in_week=7, longest_master_streak=4)
    tracker.on_activity_removed([])
    assert tracker.records.most_workouts_in_week.value == 7
    assert tracker.records.longest_master_streak.value == 4


def test_edits_rescan_without_announcing(make_activity):
    activity = make_activity(ActivityType.RUNNING, calories=900)
    tracker = RecordTracker()
    _added(tracker, activity)

    edited = make_activity(ActivityType.RUNNING, calories=400, distance=12)
    edited.id = activity.id
    broken = tracker.on_activity_updated([edited], aggregate([edited], week_window(TODAY)))

    assert tracker.records.highest_calories.value == 400
    assert all(not r.announce for r in broken)
    assert tracker.records.most_miles_in_week.value == 12


def test_offer_streak():
    tracker = RecordTracker()
    assert tracker.offer_streak("master", 1)
    assert not tracker.offer_streak("master", 1)
    assert tracker.offer_streak("master", 2)
    assert tracker.records.longest_master_streak.value == 2


def test_formatting():
    assert format_duration(45) == "45 min"
    assert format_duration(95) == "1h 35m"
    assert format_pace(7.5) == "7:30"
