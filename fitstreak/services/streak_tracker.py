import logging
from datetime import date
from typing import Iterable, List, Optional

from fitstreak.config import settings
from fitstreak.models.activity import Activity, GOAL_CATEGORIES
from fitstreak.models.goals import UserGoals
from fitstreak.schemas.progress import WeeklyAggregate
from fitstreak.schemas.records import MASTER, StreakEvent, StreakEvents, Streaks, streak_key
from fitstreak.services.goal_evaluator import evaluate
from fitstreak.services.record_tracker import RecordTracker
from fitstreak.services.week_window import DateLike, local_today, week_start_for, weeks_between
from fitstreak.services.weekly_aggregator import aggregate

logger = logging.getLogger(__name__)


class StreakTracker:
    """Advances weekly streaks when goals are completed.

    A streak counts consecutive weeks in which its goal was met. Each
    category is credited at most once per week, on the activity that
    takes it from below its goal to at-or-above it; the master streak is
    credited once, on the activity that completes the last open category.
    Weeks that close with a goal missed reset that streak (see
    :meth:`roll_week`).
    """

    def __init__(self, streaks: Optional[Streaks] = None, record_tracker: Optional[RecordTracker] = None):
        self.streaks = streaks if streaks is not None else Streaks()
        self.record_tracker = record_tracker if record_tracker is not None else RecordTracker()

    def on_activity_change(self, previous: WeeklyAggregate, new: WeeklyAggregate, goals: UserGoals) -> StreakEvents:
        self._enter_week(new.window.start)

        before = evaluate(previous, goals)
        after = evaluate(new, goals)
        events = StreakEvents()

        for goal_category in GOAL_CATEGORIES:
            just_completed = after.per_category_met[goal_category] and not before.per_category_met[goal_category]
            if just_completed:
                event = self._advance(streak_key(goal_category))
                if event:
                    event.category = goal_category
                    events.categories.append(event)

        if after.all_goals_met and not before.all_goals_met:
            events.master = self._advance(MASTER)

        return events

    def on_activity_removed(self, previous: WeeklyAggregate, new: WeeklyAggregate, goals: UserGoals) -> List[str]:
        """Take back this week's credit for goals an activity no longer completes.

        Only a category whose completed count dropped between ``previous``
        and ``new`` can lose its credit, so changes to other weeks never
        touch the current one. Returns the streak keys that were revoked.
        Longest-streak records keep the peak they reached.
        """
        if self.streaks.week_start != new.window.start:
            return []

        after = evaluate(new, goals)
        dropped = [
            c for c in GOAL_CATEGORIES
            if new.completed(c) < previous.completed(c)
        ]
        revoked = [
            streak_key(c) for c in dropped
            if not after.per_category_met[c] and self.streaks.is_credited(streak_key(c))
        ]
        if dropped and not after.all_goals_met and self.streaks.is_credited(MASTER):
            revoked.append(MASTER)

        for key in revoked:
            self.streaks.set(key, self.streaks.get(key) - 1)
            self.streaks.credited.remove(key)
            logger.info("Revoked %s streak credit for week of %s", key, new.window.start)

        return revoked

    def roll_week(self, activities: Iterable[Activity], goals: UserGoals, today: Optional[DateLike] = None) -> Streaks:
        """Close every week that ended since the last evaluation.

        A week that closed with a category goal missed resets that
        category's streak; a week without all three goals met resets the
        master streak. A goal met in a closed week but never credited,
        e.g. completed by an activity logged after the week ended, is
        credited now.
        """
        current_start = week_start_for(today if today is not None else local_today())

        if self.streaks.week_start is None:
            self._enter_week(current_start)
            return self.streaks
        if self.streaks.week_start >= current_start:
            return self.streaks

        activities = list(activities)
        for window in weeks_between(self.streaks.week_start, current_start):
            self._enter_week(window.start)
            closed = evaluate(aggregate(activities, window), goals)
            for goal_category in GOAL_CATEGORIES:
                self._close(streak_key(goal_category), closed.per_category_met[goal_category], window.start)
            self._close(MASTER, closed.all_goals_met, window.start)

        self._enter_week(current_start)
        return self.streaks

    def _close(self, key: str, met: bool, week_of: date):
        if not met:
            self._reset(key, week_of)
        elif not self.streaks.is_credited(key):
            self._advance(key)

    def _enter_week(self, week_start: date):
        if self.streaks.week_start is None or week_start > self.streaks.week_start:
            self.streaks.week_start = week_start
            self.streaks.credited = []

    def _advance(self, key: str) -> Optional[StreakEvent]:
        if self.streaks.is_credited(key):
            return None

        value = self.streaks.get(key) + 1
        self.streaks.set(key, value)
        self.streaks.credited.append(key)

        record_breaking = self.record_tracker.offer_streak(key, value)
        milestone = (
            not record_breaking
            and settings.STREAK_MILESTONE_EVERY > 0
            and value % settings.STREAK_MILESTONE_EVERY == 0
        )
        logger.info("%s streak advanced to %d (record=%s)", key, value, record_breaking)
        return StreakEvent(streak=key, value=value, record_breaking=record_breaking, milestone=milestone)

    def _reset(self, key: str, week_of: date):
        if self.streaks.get(key):
            logger.info("%s streak reset after missed week of %s", key, week_of)
        self.streaks.set(key, 0)
