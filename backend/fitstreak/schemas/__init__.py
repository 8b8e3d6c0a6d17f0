"""Pydantic schemas package for API request/response models."""

from fitstreak.schemas.fitness_log import (
    FitnessLogBase,
    FitnessLogCreate,
    FitnessLogResponse,
)
from fitstreak.schemas.stats import (
    Badge,
    BMICategory,
    BMIResult,
    HeatmapDay,
    StatsSnapshot,
    WeightPoint,
)

__all__ = [
    # Fitness log schemas
    "FitnessLogBase",
    "FitnessLogCreate",
    "FitnessLogResponse",
    # Stats schemas
    "Badge",
    "BMICategory",
    "BMIResult",
    "HeatmapDay",
    "StatsSnapshot",
    "WeightPoint",
]
