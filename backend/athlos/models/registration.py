from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlalchemy import String
from sqlalchemy import UniqueConstraint as SAUniqueConstraint
from sqlmodel import Column, Field, SQLModel


class RegistrationStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"


class Registration(SQLModel, table=True):
    __table_args__ = (
        # One entry per athlete per event
        SAUniqueConstraint("event_id", "athlete_id", name="uq_event_athlete"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    event_id: str = Field(index=True)
    athlete_id: str
    seed: Optional[int] = Field(default=None)  # 1-based seed (1=highest); None = seed by entry order
    club: Optional[str] = Field(default=None)
    status: RegistrationStatus = Field(default=RegistrationStatus.pending, sa_column=Column(String, nullable=False))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    confirmed_at: Optional[datetime] = Field(default=None)
