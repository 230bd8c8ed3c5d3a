from fastapi import APIRouter, Depends
from sqlmodel import Session

from fitstreak.database import get_session
from fitstreak.crud import get_goals, upsert_goals
from fitstreak.schemas.goals import GoalsUpdate, GoalsResponse

router = APIRouter(prefix="/users", tags=["goals"])

@router.get("/{user_id}/goals", response_model=GoalsResponse)
async def read_goals(
    user_id: int,
    session: Session = Depends(get_session)
) -> GoalsResponse:
    """Get a user's weekly goals; defaults apply until they are set"""
    return get_goals(session, user_id)

@router.put("/{user_id}/goals", response_model=GoalsResponse)
async def update_goals(
    user_id: int,
    goals: GoalsUpdate,
    session: Session = Depends(get_session)
) -> GoalsResponse:
    """Set some or all of a user's weekly goals"""
    return upsert_goals(session, user_id, goals)
