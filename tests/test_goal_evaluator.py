from fitstreak.models import ActivityType, GoalCategory, UserGoals
from fitstreak.services.goal_evaluator import evaluate
from fitstreak.services.week_window import week_window
from fitstreak.services.weekly_aggregator import aggregate
from tests.conftest import TODAY


def _week(make_activity, strength=0, cardio=0, recovery=0):
    activities = (
        [make_activity() for _ in range(strength)]
        + [make_activity(ActivityType.RUNNING) for _ in range(cardio)]
        + [make_activity(ActivityType.SAUNA) for _ in range(recovery)]
    )
    return aggregate(activities, week_window(TODAY))


def test_overall_percent_caps_each_category(make_activity, goals):
    evaluation = evaluate(_week(make_activity, strength=10), goals)
    # 4 of 9 sessions credited, surplus strength doesn't fill cardio or recovery
    assert evaluation.overall_percent == 44
    assert evaluation.per_category_met[GoalCategory.STRENGTH]
    assert not evaluation.all_goals_met


def test_all_goals_met(make_activity, goals):
    evaluation = evaluate(_week(make_activity, strength=4, cardio=5, recovery=2), goals)
    assert evaluation.all_goals_met
    assert evaluation.overall_percent == 100
    assert set(evaluation.category_percent.values()) == {100}


def test_zero_goals(make_activity):
    goals = UserGoals(user_id=1, strength_per_week=0, cardio_per_week=0, recovery_per_week=0)
    evaluation = evaluate(_week(make_activity, cardio=2), goals)
    assert evaluation.overall_percent == 0
    assert evaluation.all_goals_met


def test_overall_percent_never_exceeds_100(make_activity, goals):
    for count in range(0, 12):
        evaluation = evaluate(_week(make_activity, strength=count, cardio=count, recovery=count), goals)
        assert 0 <= evaluation.overall_percent <= 100
