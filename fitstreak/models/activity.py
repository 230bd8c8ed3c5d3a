from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import date, datetime
from enum import Enum

class ActivityType(str, Enum):
    STRENGTH_TRAINING = "Strength Training"
    RUNNING = "Running"
    CYCLE = "Cycle"
    SPORTS = "Sports"
    YOGA = "Yoga"
    PILATES = "Pilates"
    COLD_PLUNGE = "Cold Plunge"
    SAUNA = "Sauna"
    OTHER = "Other"

class StrengthType(str, Enum):
    LIFTING = "Lifting"
    BODYWEIGHT = "Bodyweight"

class CountToward(str, Enum):
    """Explicit goal override chosen when logging an activity"""
    STRENGTH = "strength"
    CARDIO = "cardio"
    RECOVERY = "recovery"

class GoalCategory(str, Enum):
    STRENGTH = "Strength"
    CARDIO = "Cardio"
    RECOVERY = "Recovery"
    OTHER = "Other"

# Categories that carry a weekly goal, in display order
GOAL_CATEGORIES = (GoalCategory.STRENGTH, GoalCategory.CARDIO, GoalCategory.RECOVERY)

class Activity(SQLModel, table=True):
    """A single logged workout or recovery session"""
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(index=True)
    date: date  # local calendar day, no time component

    # Classification
    type: ActivityType
    subtype: Optional[str] = None  # focus area, sport name, ...
    strength_type: Optional[StrengthType] = None
    count_toward: Optional[CountToward] = None
    custom_category: Optional[CountToward] = None  # only used for type Other

    # Measurements
    duration: Optional[float] = None  # minutes
    distance: Optional[float] = None  # miles
    calories: Optional[int] = None
    avg_heart_rate: Optional[int] = None  # bpm
    max_heart_rate: Optional[int] = None  # bpm

    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
