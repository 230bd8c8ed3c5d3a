from fitstreak.models.activity import GOAL_CATEGORIES
from fitstreak.models.goals import UserGoals
from fitstreak.schemas.progress import GoalEvaluation, WeeklyAggregate


def _percent(done: float, target: float) -> int:
    if target <= 0:
        return 0
    return max(0, min(100, round(done / target * 100)))


def evaluate(aggregate: WeeklyAggregate, goals: UserGoals) -> GoalEvaluation:
    """Compare a week's counts against the weekly targets.

    Surplus sessions in one category never make up for another: each
    category's contribution to the overall percentage is capped at its goal.
    """
    per_category_met = {}
    category_percent = {}
    credited = 0
    total_goal = 0

    for goal_category in GOAL_CATEGORIES:
        completed = aggregate.completed(goal_category)
        goal = goals.goal_for(goal_category)
        per_category_met[goal_category] = completed >= goal
        category_percent[goal_category] = _percent(min(completed, goal), goal)
        credited += min(completed, goal)
        total_goal += goal

    return GoalEvaluation(
        per_category_met=per_category_met,
        category_percent=category_percent,
        all_goals_met=all(per_category_met.values()),
        overall_percent=_percent(credited, total_goal),
    )
