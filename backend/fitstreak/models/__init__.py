"""Database models for the fitness challenge tracker."""

from fitstreak.models.base import Base
from fitstreak.models.fitness_log import FitnessLog, ExerciseType

__all__ = [
    "Base",
    "FitnessLog",
    "ExerciseType",
]
