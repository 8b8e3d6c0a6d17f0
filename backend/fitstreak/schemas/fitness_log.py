"""Pydantic schemas for fitness log API operations."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from fitstreak.models.fitness_log import ExerciseType


class FitnessLogBase(BaseModel):
    """Base schema for check-in data."""

    duration: int = Field(0, description="Session duration in minutes")
    type: ExerciseType = Field(ExerciseType.CARDIO, description="Exercise type (cardio or strength)")
    calories: int = Field(0, description="Calories burned (kcal)")
    weight: Optional[float] = Field(None, description="Body weight in kg, if recorded")

    @field_validator("duration", "calories", mode="before")
    @classmethod
    def blank_count_is_zero(cls, v):
        # Form fields left empty arrive as "" or null
        if v is None or v == "":
            return 0
        return v

    @field_validator("weight", mode="before")
    @classmethod
    def blank_weight_is_missing(cls, v):
        if v == "":
            return None
        return v


class FitnessLogCreate(FitnessLogBase):
    """Schema for creating a check-in."""

    duration: int = Field(0, ge=0, description="Session duration in minutes")
    calories: int = Field(0, ge=0, description="Calories burned (kcal)")
    weight: Optional[float] = Field(None, gt=0, description="Body weight in kg, if recorded")
    date: Optional[datetime] = Field(
        None,
        description="Session timestamp; defaults to the time of the request"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "duration": 45,
                "type": "strength",
                "calories": 320,
                "weight": 68.2
            }
        }


class FitnessLogResponse(FitnessLogBase):
    """Schema for check-in API responses.

    Stored rows are accepted as they are; limits apply only when creating.
    """

    id: str = Field(..., description="Log ID")
    user_id: str = Field(..., description="Owner identity")
    date: datetime = Field(..., description="Session timestamp")
    checked_in: bool = Field(True, description="Always true for a stored check-in")
    created_at: Optional[datetime] = Field(None, description="Created timestamp")

    @field_validator("id", mode="before")
    @classmethod
    def id_as_string(cls, v):
        # Hosted tables may use bigint keys
        return str(v) if isinstance(v, int) else v

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": "2f0d1f5e-4c55-4a5e-9a55-0f6d3f3f8e21",
                "user_id": "myself",
                "date": "2026-01-15T07:30:00Z",
                "duration": 45,
                "type": "strength",
                "calories": 320,
                "weight": 68.2,
                "checked_in": True,
                "created_at": "2026-01-15T07:30:01Z"
            }
        }
