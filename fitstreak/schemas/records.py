from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date
from enum import Enum

from fitstreak.models.activity import ActivityType, GoalCategory

MASTER = "master"

def streak_key(category: GoalCategory) -> str:
    """Streaks field name for a goal category ("strength", "cardio", "recovery")"""
    return category.value.lower()

class RecordEntry(BaseModel):
    value: Optional[float] = None  # None while the record is unset
    activity_type: Optional[ActivityType] = None

    @property
    def is_set(self) -> bool:
        return self.value is not None

class PersonalRecords(BaseModel):
    # Single activity
    highest_calories: RecordEntry = Field(default_factory=RecordEntry)
    longest_workout: RecordEntry = Field(default_factory=RecordEntry)
    longest_strength_duration: RecordEntry = Field(default_factory=RecordEntry)
    longest_cardio_duration: RecordEntry = Field(default_factory=RecordEntry)
    longest_distance: RecordEntry = Field(default_factory=RecordEntry)
    fastest_running_pace: RecordEntry = Field(default_factory=RecordEntry)  # min/mile
    fastest_cycling_pace: RecordEntry = Field(default_factory=RecordEntry)  # min/mile

    # Weekly aggregate
    most_workouts_in_week: RecordEntry = Field(default_factory=RecordEntry)
    most_calories_in_week: RecordEntry = Field(default_factory=RecordEntry)
    most_miles_in_week: RecordEntry = Field(default_factory=RecordEntry)

    # Streak derived
    longest_master_streak: RecordEntry = Field(default_factory=RecordEntry)
    longest_strength_streak: RecordEntry = Field(default_factory=RecordEntry)
    longest_cardio_streak: RecordEntry = Field(default_factory=RecordEntry)
    longest_recovery_streak: RecordEntry = Field(default_factory=RecordEntry)

    def get(self, metric: str) -> RecordEntry:
        return getattr(self, metric)

    def set(self, metric: str, entry: RecordEntry):
        setattr(self, metric, entry)

class Streaks(BaseModel):
    """Weekly streak counters plus the bookkeeping for the week they were last evaluated in"""
    master: int = Field(default=0, ge=0)
    strength: int = Field(default=0, ge=0)
    cardio: int = Field(default=0, ge=0)
    recovery: int = Field(default=0, ge=0)

    week_start: Optional[date] = None  # Sunday of the week being tracked
    credited: List[str] = Field(default_factory=list)  # streak keys already advanced this week

    def get(self, key: str) -> int:
        return getattr(self, key)

    def set(self, key: str, value: int):
        setattr(self, key, max(0, value))

    def is_credited(self, key: str) -> bool:
        return key in self.credited

class StreakEvent(BaseModel):
    streak: str  # streak key, or "master"
    category: Optional[GoalCategory] = None  # None for the master streak
    value: int
    record_breaking: bool = False
    milestone: bool = False

class StreakEvents(BaseModel):
    categories: List[StreakEvent] = Field(default_factory=list)
    master: Optional[StreakEvent] = None

    @property
    def has_events(self) -> bool:
        return bool(self.categories) or self.master is not None

    @property
    def record_breaking(self) -> bool:
        events = self.categories + ([self.master] if self.master else [])
        return any(e.record_breaking for e in events)

class RecordBroken(BaseModel):
    metric: str
    value: float
    previous: Optional[float] = None
    activity_type: Optional[ActivityType] = None
    message: str
    announce: bool = True  # False for silent updates (e.g. weekly calories)

class CelebrationKind(str, Enum):
    MASTER = "master"
    CATEGORY = "category"
    RECORD = "record"

class CelebrationDisplay(str, Enum):
    FULLSCREEN = "fullscreen"
    TOAST = "toast"

class Celebration(BaseModel):
    kind: CelebrationKind
    priority: int  # 1 is highest
    display: CelebrationDisplay
    title: str
    message: str
    details: List[str] = Field(default_factory=list)
    categories: List[GoalCategory] = Field(default_factory=list)
    streak: Optional[int] = None
    record_breaking: bool = False
