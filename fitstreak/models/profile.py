from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON
from typing import Any, Dict
from datetime import datetime

class UserProfile(SQLModel, table=True):
    """Per-user engine state persisted alongside the profile.

    ``streaks`` and ``records`` hold the JSON dumps of the
    :class:`~fitstreak.schemas.records.Streaks` and
    :class:`~fitstreak.schemas.records.PersonalRecords` values.
    """
    user_id: int = Field(primary_key=True)
    streaks: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))
    records: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
