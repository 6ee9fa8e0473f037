from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlalchemy import String
from sqlmodel import Column, Field, SQLModel


class PaymentStatus(str, Enum):
    succeeded = "succeeded"
    failed = "failed"


class Payment(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    registration_id: int = Field(foreign_key="registration.id", index=True)
    amount: float
    status: PaymentStatus = Field(sa_column=Column(String, nullable=False))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
