import logging
from typing import Iterable, List, Optional

from fitstreak.config import settings
from fitstreak.models.activity import Activity, GOAL_CATEGORIES
from fitstreak.models.goals import UserGoals
from fitstreak.models.profile import UserProfile
from fitstreak.schemas.progress import (
    ActivityOutcome,
    CaloriesProgress,
    CategoryProgress,
    RemovalOutcome,
    StepsProgress,
    WeeklyProgress,
)
from fitstreak.schemas.records import PersonalRecords, Streaks
from fitstreak.services.celebration_decider import decide
from fitstreak.services.goal_evaluator import evaluate
from fitstreak.services.record_tracker import RecordTracker
from fitstreak.services.streak_tracker import StreakTracker
from fitstreak.services.week_window import DateLike, days_left_in_week, local_today, to_local_date, week_window
from fitstreak.services.weekly_aggregator import aggregate

logger = logging.getLogger(__name__)


class ProgressService:
    """Entry point for the presentation layer.

    Holds one user's streaks and personal records in memory. Every call
    runs to completion and mutates that state in place; persisting the
    returned ``streaks`` and ``records`` is the caller's job.
    """

    def __init__(self, streaks: Optional[Streaks] = None, records: Optional[PersonalRecords] = None):
        self.record_tracker = RecordTracker(records)
        self.streak_tracker = StreakTracker(streaks, self.record_tracker)

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "ProgressService":
        return cls(
            streaks=Streaks.model_validate(profile.streaks or {}),
            records=PersonalRecords.model_validate(profile.records or {}),
        )

    @property
    def streaks(self) -> Streaks:
        return self.streak_tracker.streaks

    @property
    def records(self) -> PersonalRecords:
        return self.record_tracker.records

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_weekly_progress(
        self,
        activities: Iterable[Activity],
        goals: UserGoals,
        today: Optional[DateLike] = None
    ) -> WeeklyProgress:
        """Progress of the current week so far. Read-only."""
        today = self._today(today)
        window = week_window(today)
        week = aggregate(activities, window)
        evaluation = evaluate(week, goals)

        categories = {}
        for goal_category in GOAL_CATEGORIES:
            tally = week.tally(goal_category)
            goal = goals.goal_for(goal_category)
            categories[goal_category] = CategoryProgress(
                completed=tally.completed,
                goal=goal,
                percent=evaluation.category_percent[goal_category],
                remaining=max(0, goal - tally.completed),
                met=evaluation.per_category_met[goal_category],
                breakdown=tally.breakdown,
                sessions=tally.sessions,
            )

        days_left = days_left_in_week(today)
        goals_open = any(not p.met for p in categories.values())
        calories_goal = goals.calories_per_week

        strength, cardio, recovery = (categories[c] for c in GOAL_CATEGORIES)
        return WeeklyProgress(
            week_start=window.start,
            week_end=window.end,
            strength=strength,
            cardio=cardio,
            recovery=recovery,
            calories=CaloriesProgress(
                burned=week.total_calories,
                goal=calories_goal,
                percent=min(100, round(week.total_calories / calories_goal * 100)) if calories_goal > 0 else 0,
            ),
            steps=StepsProgress(goal=goals.steps_per_day),
            miles=round(week.total_miles, 2),
            overall_percent=evaluation.overall_percent,
            all_goals_met=evaluation.all_goals_met,
            days_left=days_left,
            streak_at_risk=goals_open and days_left <= settings.STREAK_AT_RISK_DAYS,
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def roll_week(
        self,
        activities: Iterable[Activity],
        goals: UserGoals,
        today: Optional[DateLike] = None
    ) -> Streaks:
        """Apply the week-boundary reset for any week closed since the last call"""
        return self.streak_tracker.roll_week(activities, goals, self._today(today))

    def record_activity(
        self,
        activities: Iterable[Activity],
        activity: Activity,
        goals: UserGoals,
        today: Optional[DateLike] = None
    ) -> ActivityOutcome:
        """Account for a newly logged activity.

        ``activities`` is the collection as it was before ``activity`` was
        added.
        """
        today = self._today(today)
        previous = self._without(activities, activity)
        updated = previous + [activity]

        self.roll_week(updated, goals, today)

        window = week_window(today)
        before = aggregate(previous, window)
        after = aggregate(updated, window)

        streak_events = self.streak_tracker.on_activity_change(before, after, goals)
        records_broken = self.record_tracker.on_activity_added(activity, after)
        celebration = decide(streak_events, records_broken)

        return ActivityOutcome(
            streaks=self.streaks.model_copy(deep=True),
            records=self.records.model_copy(deep=True),
            celebration=celebration,
            records_broken=records_broken,
            progress=self.get_weekly_progress(updated, goals, today),
        )

    def update_activity(
        self,
        activities: Iterable[Activity],
        activity: Activity,
        goals: UserGoals,
        today: Optional[DateLike] = None
    ) -> ActivityOutcome:
        """Account for an edited activity. Edits never celebrate.

        ``activities`` still holds the old version of ``activity``.
        """
        today = self._today(today)
        previous = list(activities)
        updated = self._without(previous, activity) + [activity]

        self.roll_week(updated, goals, today)

        window = week_window(today)
        before = aggregate(previous, window)
        after = aggregate(updated, window)

        self.streak_tracker.on_activity_change(before, after, goals)
        self.streak_tracker.on_activity_removed(before, after, goals)
        records_broken = self.record_tracker.on_activity_updated(updated, after)

        return ActivityOutcome(
            streaks=self.streaks.model_copy(deep=True),
            records=self.records.model_copy(deep=True),
            celebration=None,
            records_broken=records_broken,
            progress=self.get_weekly_progress(updated, goals, today),
        )

    def remove_activity(
        self,
        remaining_activities: Iterable[Activity],
        goals: UserGoals,
        today: Optional[DateLike] = None,
        removed: Optional[Activity] = None
    ) -> RemovalOutcome:
        """Account for a deleted activity; ``remaining_activities`` no longer holds it.

        Streak credit can only be taken back when the deleted ``removed``
        activity is given; records are rescanned either way.
        """
        today = self._today(today)
        remaining = list(remaining_activities)

        self.roll_week(remaining, goals, today)

        if removed is not None:
            window = week_window(today)
            before = aggregate(remaining + [removed], window)
            after = aggregate(remaining, window)
            self.streak_tracker.on_activity_removed(before, after, goals)
        self.record_tracker.on_activity_removed(remaining)

        return RemovalOutcome(
            streaks=self.streaks.model_copy(deep=True),
            records=self.records.model_copy(deep=True),
            progress=self.get_weekly_progress(remaining, goals, today),
        )

    def _today(self, today: Optional[DateLike]):
        return to_local_date(today) if today is not None else local_today()

    def _without(self, activities: Iterable[Activity], activity: Activity) -> List[Activity]:
        if activity.id is None:
            return list(activities)
        return [a for a in activities if a.id != activity.id]
