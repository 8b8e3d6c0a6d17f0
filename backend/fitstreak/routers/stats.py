"""Stats API router for derived challenge statistics."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from fitstreak.config import settings
from fitstreak.schemas.fitness_log import FitnessLogResponse
from fitstreak.schemas.stats import Badge, BMIResult, StatsSnapshot
from fitstreak.services.identity import get_user_id
from fitstreak.services.log_store import LogStore, LogStoreError, get_log_store
from fitstreak.services.stats_service import StatsService, stats_service

logger = logging.getLogger(__name__)

router = APIRouter()


def get_stats_service() -> StatsService:
    """Dependency returning the stats service."""
    return stats_service


async def _load_logs(store: LogStore, user_id: str) -> List[FitnessLogResponse]:
    try:
        return await store.list_logs(user_id)
    except LogStoreError as e:
        logger.error(f"Error fetching logs for user {user_id}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to load logs: {e.message}",
        )


@router.get("/", response_model=StatsSnapshot)
async def get_stats(
    user_id: str = Depends(get_user_id),
    store: LogStore = Depends(get_log_store),
    service: StatsService = Depends(get_stats_service),
) -> StatsSnapshot:
    """
    Get challenge statistics derived from all of the user's check-ins.

    Returns progress, streak, totals, weight trend, badges and the
    trailing activity heatmap. The snapshot is recomputed on every call.
    """
    logs = await _load_logs(store, user_id)
    return service.derive(logs)


@router.get("/bmi", response_model=BMIResult)
async def get_bmi(
    height: Optional[str] = Query(None, description="Height in centimeters"),
    user_id: str = Depends(get_user_id),
    store: LogStore = Depends(get_log_store),
    service: StatsService = Depends(get_stats_service),
) -> BMIResult:
    """
    Get BMI for the most recently recorded weight.

    Height is free text as typed by the user; when omitted the configured
    default height is used. An unusable height or no recorded weight
    gives a value of 0 with the label "unknown".
    """
    if height is None:
        height = settings.DEFAULT_HEIGHT_CM

    logs = await _load_logs(store, user_id)
    weight_history = service.build_weight_history(logs)
    return service.calculate_bmi(weight_history, height)


@router.get("/badges", response_model=List[Badge])
async def get_badges(
    user_id: str = Depends(get_user_id),
    store: LogStore = Depends(get_log_store),
    service: StatsService = Depends(get_stats_service),
) -> List[Badge]:
    """Get the badge catalog with each badge's unlock state."""
    logs = await _load_logs(store, user_id)
    return service.derive(logs).badges
