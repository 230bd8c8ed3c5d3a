from .activity import (
    get_activity,
    list_activities,
    create_activity,
    build_updated_activity,
    update_activity,
    delete_activity,
)
from .profile import load_profile, save_profile, get_goals, upsert_goals

__all__ = [
    'get_activity',
    'list_activities',
    'create_activity',
    'build_updated_activity',
    'update_activity',
    'delete_activity',
    'load_profile',
    'save_profile',
    'get_goals',
    'upsert_goals'
]
