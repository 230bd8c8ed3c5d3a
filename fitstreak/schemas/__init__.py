from .activity import ActivityCreate, ActivityUpdate, ActivityResponse
from .goals import GoalsUpdate, GoalsResponse
from .records import (
    RecordEntry,
    PersonalRecords,
    Streaks,
    StreakEvent,
    StreakEvents,
    RecordBroken,
    Celebration,
    CelebrationKind,
    CelebrationDisplay,
)
from .progress import (
    WeekWindow,
    CategoryTally,
    WeeklyAggregate,
    GoalEvaluation,
    WeeklyProgress,
    ActivityOutcome,
    RemovalOutcome,
    ActivityLoggedResponse,
    ActivityRemovedResponse,
)

__all__ = [
    'ActivityCreate',
    'ActivityUpdate',
    'ActivityResponse',
    'GoalsUpdate',
    'GoalsResponse',
    'RecordEntry',
    'PersonalRecords',
    'Streaks',
    'StreakEvent',
    'StreakEvents',
    'RecordBroken',
    'Celebration',
    'CelebrationKind',
    'CelebrationDisplay',
    'WeekWindow',
    'CategoryTally',
    'WeeklyAggregate',
    'GoalEvaluation',
    'WeeklyProgress',
    'ActivityOutcome',
    'RemovalOutcome',
    'ActivityLoggedResponse',
    'ActivityRemovedResponse',
]
