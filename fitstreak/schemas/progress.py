from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from datetime import date

from fitstreak.models.activity import GoalCategory
from fitstreak.schemas.activity import ActivityResponse
from fitstreak.schemas.records import Celebration, PersonalRecords, RecordBroken, Streaks

class WeekWindow(BaseModel):
    """Inclusive range of local calendar days"""
    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

class CategoryTally(BaseModel):
    completed: int = 0
    breakdown: Dict[str, int] = Field(default_factory=dict)
    sessions: List[str] = Field(default_factory=list)

class WeeklyAggregate(BaseModel):
    window: WeekWindow
    strength: CategoryTally = Field(default_factory=CategoryTally)
    cardio: CategoryTally = Field(default_factory=CategoryTally)
    recovery: CategoryTally = Field(default_factory=CategoryTally)
    other_count: int = 0

    total_activities: int = 0
    total_calories: int = 0
    total_miles: float = 0.0

    @property
    def workouts(self) -> int:
        """Strength and cardio sessions; recovery is not a workout"""
        return self.strength.completed + self.cardio.completed

    def tally(self, category: GoalCategory) -> Optional[CategoryTally]:
        if category == GoalCategory.STRENGTH:
            return self.strength
        if category == GoalCategory.CARDIO:
            return self.cardio
        if category == GoalCategory.RECOVERY:
            return self.recovery
        return None

    def completed(self, category: GoalCategory) -> int:
        if category == GoalCategory.OTHER:
            return self.other_count
        return self.tally(category).completed

class GoalEvaluation(BaseModel):
    per_category_met: Dict[GoalCategory, bool]
    category_percent: Dict[GoalCategory, int]
    all_goals_met: bool
    overall_percent: int

class CategoryProgress(BaseModel):
    completed: int
    goal: int
    percent: int
    remaining: int
    met: bool
    breakdown: Dict[str, int] = Field(default_factory=dict)
    sessions: List[str] = Field(default_factory=list)

class CaloriesProgress(BaseModel):
    burned: int
    goal: int
    percent: int

class StepsProgress(BaseModel):
    goal: int

class WeeklyProgress(BaseModel):
    week_start: date
    week_end: date
    strength: CategoryProgress
    cardio: CategoryProgress
    recovery: CategoryProgress
    calories: CaloriesProgress
    steps: StepsProgress
    miles: float
    overall_percent: int
    all_goals_met: bool
    days_left: int  # days remaining until Saturday
    streak_at_risk: bool

class ActivityOutcome(BaseModel):
    streaks: Streaks
    records: PersonalRecords
    celebration: Optional[Celebration] = None
    records_broken: List[RecordBroken] = Field(default_factory=list)
    progress: WeeklyProgress

class RemovalOutcome(BaseModel):
    streaks: Streaks
    records: PersonalRecords
    progress: WeeklyProgress

class ActivityLoggedResponse(ActivityOutcome):
    activity: ActivityResponse

class ActivityRemovedResponse(RemovalOutcome):
    activity_id: int
