from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from fitstreak.models.activity import GoalCategory

class UserGoals(SQLModel, table=True):
    """Weekly targets per goal category plus the daily steps and calorie targets"""
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(unique=True, index=True)

    strength_per_week: int = Field(default=4, ge=0)
    cardio_per_week: int = Field(default=3, ge=0)
    recovery_per_week: int = Field(default=2, ge=0)
    steps_per_day: int = Field(default=10000, ge=0)
    calories_per_week: int = Field(default=3500, ge=0)

    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def goal_for(self, category: GoalCategory) -> int:
        """Weekly session target for a goal category (0 for Other)"""
        if category == GoalCategory.STRENGTH:
            return self.strength_per_week
        if category == GoalCategory.CARDIO:
            return self.cardio_per_week
        if category == GoalCategory.RECOVERY:
            return self.recovery_per_week
        return 0
