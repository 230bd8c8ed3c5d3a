from .activity import Activity, ActivityType, StrengthType, CountToward, GoalCategory, GOAL_CATEGORIES
from .goals import UserGoals
from .profile import UserProfile

__all__ = [
    'Activity',
    'ActivityType',
    'StrengthType',
    'CountToward',
    'GoalCategory',
    'GOAL_CATEGORIES',
    'UserGoals',
    'UserProfile'
]
