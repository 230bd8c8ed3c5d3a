from sqlmodel import Session, select
from datetime import datetime

from fitstreak.models.goals import UserGoals
from fitstreak.models.profile import UserProfile
from fitstreak.schemas.goals import GoalsUpdate
from fitstreak.schemas.records import PersonalRecords, Streaks

def load_profile(session: Session, user_id: int) -> UserProfile:
    """Get a user's persisted engine state, starting from zero for a new user"""
    profile = session.get(UserProfile, user_id)
    if profile:
        return profile
    return UserProfile(
        user_id=user_id,
        streaks=Streaks().model_dump(mode="json"),
        records=PersonalRecords().model_dump(mode="json"),
    )

def save_profile(session: Session, user_id: int, streaks: Streaks, records: PersonalRecords) -> UserProfile:
    """Persist streaks and personal records for a user"""
    profile = session.get(UserProfile, user_id)
    if not profile:
        profile = UserProfile(user_id=user_id)

    # Reassign whole documents so the JSON columns are flagged dirty
    profile.streaks = streaks.model_dump(mode="json")
    profile.records = records.model_dump(mode="json")
    profile.updated_at = datetime.utcnow()

    session.add(profile)
    session.commit()
    session.refresh(profile)
    return profile

def get_goals(session: Session, user_id: int) -> UserGoals:
    """Get a user's goals, falling back to the defaults"""
    goals = session.exec(select(UserGoals).where(UserGoals.user_id == user_id)).first()
    return goals or UserGoals(user_id=user_id)

def upsert_goals(session: Session, user_id: int, update: GoalsUpdate) -> UserGoals:
    """Create or update a user's goals"""
    goals = session.exec(select(UserGoals).where(UserGoals.user_id == user_id)).first()
    if not goals:
        goals = UserGoals(user_id=user_id)

    for key, value in update.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(goals, key, value)
    goals.updated_at = datetime.utcnow()

    session.add(goals)
    session.commit()
    session.refresh(goals)
    return goals
