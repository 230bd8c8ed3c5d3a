import logging
from typing import List, Optional
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session

from fitstreak.database import get_session
from fitstreak.models.activity import Activity
from fitstreak.crud import (
    get_activity,
    list_activities,
    create_activity,
    build_updated_activity,
    update_activity,
    delete_activity,
    load_profile,
    save_profile,
    get_goals,
)
from fitstreak.schemas.activity import ActivityCreate, ActivityUpdate, ActivityResponse
from fitstreak.schemas.progress import ActivityLoggedResponse, ActivityRemovedResponse, WeeklyProgress
from fitstreak.schemas.records import PersonalRecords, Streaks
from fitstreak.services.categorizer import category
from fitstreak.services.progress_service import ProgressService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["activities"])

TODAY_DESCRIPTION = "Client's local date; defaults to the server's local date"

def to_response(activity: Activity) -> ActivityResponse:
    response = ActivityResponse.model_validate(activity)
    response.category = category(activity)
    return response

def _not_found(activity_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Activity {activity_id} not found"
    )

@router.get("/{user_id}/activities", response_model=List[ActivityResponse])
async def get_activities(
    user_id: int,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    session: Session = Depends(get_session)
) -> List[ActivityResponse]:
    """List a user's activities, newest first"""
    return [to_response(a) for a in list_activities(session, user_id, start_date, end_date)]

@router.post("/{user_id}/activities", response_model=ActivityLoggedResponse, status_code=status.HTTP_201_CREATED)
async def log_activity(
    user_id: int,
    activity: ActivityCreate,
    today: Optional[date] = Query(None, description=TODAY_DESCRIPTION),
    session: Session = Depends(get_session)
) -> ActivityLoggedResponse:
    """Log an activity and return updated streaks, records and the celebration to show"""
    goals = get_goals(session, user_id)
    previous = list_activities(session, user_id)
    service = ProgressService.from_profile(load_profile(session, user_id))

    db_activity = create_activity(session, user_id, activity)
    outcome = service.record_activity(previous, db_activity, goals, today)
    save_profile(session, user_id, outcome.streaks, outcome.records)

    logger.info("User %s logged activity %s (%s)", user_id, db_activity.id, db_activity.type)
    return ActivityLoggedResponse(activity=to_response(db_activity), **outcome.model_dump())

@router.put("/{user_id}/activities/{activity_id}", response_model=ActivityLoggedResponse)
async def edit_activity(
    user_id: int,
    activity_id: int,
    activity: ActivityUpdate,
    today: Optional[date] = Query(None, description=TODAY_DESCRIPTION),
    session: Session = Depends(get_session)
) -> ActivityLoggedResponse:
    """Edit an activity; records and streaks are re-derived without a celebration"""
    existing = get_activity(session, user_id, activity_id)
    if not existing:
        raise _not_found(activity_id)

    goals = get_goals(session, user_id)
    previous = list_activities(session, user_id)
    service = ProgressService.from_profile(load_profile(session, user_id))

    edited = build_updated_activity(existing, activity)
    outcome = service.update_activity(previous, edited, goals, today)

    db_activity = update_activity(session, user_id, activity_id, activity)
    save_profile(session, user_id, outcome.streaks, outcome.records)

    return ActivityLoggedResponse(activity=to_response(db_activity), **outcome.model_dump())

@router.delete("/{user_id}/activities/{activity_id}", response_model=ActivityRemovedResponse)
async def remove_activity(
    user_id: int,
    activity_id: int,
    today: Optional[date] = Query(None, description=TODAY_DESCRIPTION),
    session: Session = Depends(get_session)
) -> ActivityRemovedResponse:
    """Delete an activity and recompute the records and streak credit it may have held"""
    existing = get_activity(session, user_id, activity_id)
    if not existing:
        raise _not_found(activity_id)

    # Detached copy; the stored row is gone after the delete commits
    removed = Activity(**existing.model_dump())
    delete_activity(session, user_id, activity_id)

    goals = get_goals(session, user_id)
    remaining = list_activities(session, user_id)
    service = ProgressService.from_profile(load_profile(session, user_id))

    outcome = service.remove_activity(remaining, goals, today, removed=removed)
    save_profile(session, user_id, outcome.streaks, outcome.records)

    logger.info("User %s deleted activity %s", user_id, activity_id)
    return ActivityRemovedResponse(activity_id=activity_id, **outcome.model_dump())

@router.get("/{user_id}/progress", response_model=WeeklyProgress)
async def get_progress(
    user_id: int,
    today: Optional[date] = Query(None, description=TODAY_DESCRIPTION),
    session: Session = Depends(get_session)
) -> WeeklyProgress:
    """Current week's progress toward each goal"""
    goals = get_goals(session, user_id)
    activities = list_activities(session, user_id)
    return ProgressService().get_weekly_progress(activities, goals, today)

@router.get("/{user_id}/records", response_model=PersonalRecords)
async def get_records(
    user_id: int,
    session: Session = Depends(get_session)
) -> PersonalRecords:
    """All-time personal records"""
    return ProgressService.from_profile(load_profile(session, user_id)).records

@router.get("/{user_id}/streaks", response_model=Streaks)
async def get_streaks(
    user_id: int,
    session: Session = Depends(get_session)
) -> Streaks:
    """Current streak counters"""
    return ProgressService.from_profile(load_profile(session, user_id)).streaks

@router.post("/{user_id}/week/roll", response_model=Streaks)
async def roll_week(
    user_id: int,
    today: Optional[date] = Query(None, description=TODAY_DESCRIPTION),
    session: Session = Depends(get_session)
) -> Streaks:
    """Close finished weeks, resetting streaks whose goals were missed"""
    goals = get_goals(session, user_id)
    activities = list_activities(session, user_id)
    service = ProgressService.from_profile(load_profile(session, user_id))

    streaks = service.roll_week(activities, goals, today)
    save_profile(session, user_id, streaks, service.records)
    return streaks
