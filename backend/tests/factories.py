"""Builders for log records used across the tests."""

from datetime import datetime, timedelta, timezone

from fitstreak.models.fitness_log import ExerciseType
from fitstreak.schemas.fitness_log import FitnessLogResponse

# Midday keeps "days ago" offsets on the intended calendar day
NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_log(days_ago: int = 0, **fields) -> FitnessLogResponse:
    """Build a stored-looking log dated ``days_ago`` days before NOW."""
    values = {
        "id": f"log-{days_ago}",
        "user_id": "myself",
        "date": NOW - timedelta(days=days_ago),
        "duration": 30,
        "type": ExerciseType.CARDIO,
        "calories": 200,
        "weight": None,
    }
    values.update(fields)
    return FitnessLogResponse(**values)
