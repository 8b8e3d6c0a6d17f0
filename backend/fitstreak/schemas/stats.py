"""Pydantic schemas for derived challenge statistics."""

from datetime import date as date_type
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class BMICategory(str, Enum):
    """BMI classification bands."""
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"
    UNKNOWN = "unknown"


class WeightPoint(BaseModel):
    """One recorded body weight on the trend line."""

    date: date_type = Field(..., description="Local calendar date of the reading")
    label: str = Field(..., description="Short month/day label, e.g. '1/15'")
    weight: float = Field(..., gt=0, description="Body weight in kg")


class HeatmapDay(BaseModel):
    """A single day in the trailing activity heatmap."""

    date: date_type
    active: bool


class Badge(BaseModel):
    """An achievement badge and whether it has been earned."""

    id: int = Field(..., ge=1, description="Badge ID")
    name: str
    description: str
    icon: str
    unlocked: bool


class StatsSnapshot(BaseModel):
    """Statistics derived from a user's complete set of check-ins."""

    total_days: int = Field(..., ge=0, description="Number of check-ins")
    goal: int = Field(..., ge=1, description="Challenge goal in days")
    progress: float = Field(..., ge=0, le=100, description="Percent of the goal completed")
    days_remaining: int = Field(..., ge=0, description="Check-ins left to reach the goal")
    total_calories: int = Field(..., description="Total kcal burned")
    total_duration: int = Field(..., description="Total minutes trained")
    total_duration_hours: int = Field(..., description="Total hours trained, rounded")
    current_streak: int = Field(..., ge=0, description="Consecutive active days ending today or yesterday")
    weight_history: list[WeightPoint] = Field(default_factory=list, description="Oldest first")
    cardio_count: int = Field(..., ge=0)
    strength_count: int = Field(..., ge=0)
    strength_ratio: float = Field(..., ge=0, description="Strength sessions as percent of check-ins")
    badges: list[Badge]
    heatmap: list[HeatmapDay] = Field(..., description="Trailing window, oldest first")

    class Config:
        json_schema_extra = {
            "example": {
                "total_days": 3,
                "goal": 100,
                "progress": 3.0,
                "days_remaining": 97,
                "total_calories": 900,
                "total_duration": 120,
                "total_duration_hours": 2,
                "current_streak": 2,
                "weight_history": [{"date": "2026-01-14", "label": "1/14", "weight": 68.4}],
                "cardio_count": 2,
                "strength_count": 1,
                "strength_ratio": 33.33,
                "badges": [
                    {"id": 1, "name": "Kickoff", "description": "Complete your first check-in",
                     "icon": "🚀", "unlocked": True}
                ],
                "heatmap": [{"date": "2026-01-15", "active": True}]
            }
        }


class BMIResult(BaseModel):
    """Body-mass index for the most recent recorded weight."""

    value: float = Field(..., ge=0, description="BMI rounded to one decimal, 0 when unknown")
    label: BMICategory
    height_cm: Optional[float] = Field(None, description="Height used for the calculation")
    weight: Optional[float] = Field(None, description="Latest recorded weight in kg")
