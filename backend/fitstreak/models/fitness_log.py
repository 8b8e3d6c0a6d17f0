"""Fitness log model for daily check-ins."""

import uuid
from datetime import datetime, timezone
from enum import Enum as PyEnum
from typing import Optional

from sqlalchemy import Integer, String, DateTime, Boolean, Float, Enum
from sqlalchemy.orm import Mapped, mapped_column

from fitstreak.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class ExerciseType(str, PyEnum):
    """Kinds of workout session a check-in can record."""
    CARDIO = "cardio"
    STRENGTH = "strength"


class FitnessLog(Base):
    """A single workout check-in against the 100-day goal."""

    __tablename__ = "fitness_logs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(String(255), index=True)

    # Session details
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True, default=_utcnow)
    duration: Mapped[int] = mapped_column(Integer, default=0)  # minutes
    type: Mapped[ExerciseType] = mapped_column(
        Enum(ExerciseType),
        default=ExerciseType.CARDIO
    )
    calories: Mapped[int] = mapped_column(Integer, default=0)  # kcal
    weight: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # kg
    checked_in: Mapped[bool] = mapped_column(Boolean, default=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    def __repr__(self) -> str:
        return f"<FitnessLog(id={self.id}, user_id='{self.user_id}', date={self.date}, type={self.type})>"
