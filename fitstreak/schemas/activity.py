from pydantic import BaseModel, Field
from typing import Optional
import datetime as dt

from fitstreak.models.activity import ActivityType, StrengthType, CountToward, GoalCategory

class ActivityBase(BaseModel):
    date: dt.date
    type: ActivityType
    subtype: Optional[str] = None
    strength_type: Optional[StrengthType] = None
    count_toward: Optional[CountToward] = None
    custom_category: Optional[CountToward] = None
    duration: Optional[float] = Field(default=None, ge=0)  # minutes
    distance: Optional[float] = Field(default=None, ge=0)  # miles
    calories: Optional[int] = Field(default=None, ge=0)
    avg_heart_rate: Optional[int] = Field(default=None, gt=0)
    max_heart_rate: Optional[int] = Field(default=None, gt=0)
    notes: Optional[str] = None

class ActivityCreate(ActivityBase):
    pass

class ActivityUpdate(BaseModel):
    date: Optional[dt.date] = None
    type: Optional[ActivityType] = None
    subtype: Optional[str] = None
    strength_type: Optional[StrengthType] = None
    count_toward: Optional[CountToward] = None
    custom_category: Optional[CountToward] = None
    duration: Optional[float] = Field(default=None, ge=0)
    distance: Optional[float] = Field(default=None, ge=0)
    calories: Optional[int] = Field(default=None, ge=0)
    avg_heart_rate: Optional[int] = Field(default=None, gt=0)
    max_heart_rate: Optional[int] = Field(default=None, gt=0)
    notes: Optional[str] = None

class ActivityResponse(ActivityBase):
    id: int
    user_id: int
    category: Optional[GoalCategory] = None
    created_at: dt.datetime

    class Config:
        from_attributes = True
