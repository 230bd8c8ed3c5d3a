from sqlmodel import Session, select
from typing import List, Optional
from datetime import date

from fitstreak.models.activity import Activity
from fitstreak.schemas.activity import ActivityCreate, ActivityUpdate

def get_activity(session: Session, user_id: int, activity_id: int) -> Optional[Activity]:
    """Get one of a user's activities by ID"""
    activity = session.get(Activity, activity_id)
    if not activity or activity.user_id != user_id:
        return None
    return activity

def list_activities(
    session: Session,
    user_id: int,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None
) -> List[Activity]:
    """Get a user's activities, newest first, with optional date filtering"""
    query = select(Activity).where(Activity.user_id == user_id)

    if start_date:
        query = query.where(Activity.date >= start_date)
    if end_date:
        query = query.where(Activity.date <= end_date)

    query = query.order_by(Activity.date.desc(), Activity.id.desc())
    return list(session.exec(query).all())

def create_activity(session: Session, user_id: int, activity: ActivityCreate) -> Activity:
    """Append a new activity"""
    db_activity = Activity(user_id=user_id, **activity.model_dump())
    session.add(db_activity)
    session.commit()
    session.refresh(db_activity)
    return db_activity

def build_updated_activity(db_activity: Activity, activity: ActivityUpdate) -> Activity:
    """Copy of a stored activity with the update applied, without touching the session"""
    data = db_activity.model_dump()
    data.update(activity.model_dump(exclude_unset=True))
    return Activity(**data)

def update_activity(session: Session, user_id: int, activity_id: int, activity: ActivityUpdate) -> Optional[Activity]:
    """Update an activity by ID"""
    db_activity = get_activity(session, user_id, activity_id)
    if not db_activity:
        return None

    for key, value in activity.model_dump(exclude_unset=True).items():
        setattr(db_activity, key, value)

    session.add(db_activity)
    session.commit()
    session.refresh(db_activity)
    return db_activity

def delete_activity(session: Session, user_id: int, activity_id: int) -> bool:
    """Remove an activity by ID"""
    db_activity = get_activity(session, user_id, activity_id)
    if not db_activity:
        return False

    session.delete(db_activity)
    session.commit()
    return True
