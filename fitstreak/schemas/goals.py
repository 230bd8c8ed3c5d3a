from pydantic import BaseModel, Field
from typing import Optional

class GoalsUpdate(BaseModel):
    strength_per_week: Optional[int] = Field(default=None, ge=0)
    cardio_per_week: Optional[int] = Field(default=None, ge=0)
    recovery_per_week: Optional[int] = Field(default=None, ge=0)
    steps_per_day: Optional[int] = Field(default=None, ge=0)
    calories_per_week: Optional[int] = Field(default=None, ge=0)

class GoalsResponse(BaseModel):
    user_id: int
    strength_per_week: int
    cardio_per_week: int
    recovery_per_week: int
    steps_per_day: int
    calories_per_week: int

    class Config:
        from_attributes = True
