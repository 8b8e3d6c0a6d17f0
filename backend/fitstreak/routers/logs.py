"""Fitness logs API router for daily check-ins."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from fitstreak.schemas.fitness_log import FitnessLogCreate, FitnessLogResponse
from fitstreak.services.identity import get_user_id
from fitstreak.services.log_store import LogNotFoundError, LogStore, LogStoreError, get_log_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=List[FitnessLogResponse])
async def list_logs(
    user_id: str = Depends(get_user_id),
    store: LogStore = Depends(get_log_store),
) -> List[FitnessLogResponse]:
    """
    List check-ins for the user, newest first.

    Raises:
        HTTPException: 502 if the log store request fails
    """
    try:
        return await store.list_logs(user_id)
    except LogStoreError as e:
        logger.error(f"Error fetching logs for user {user_id}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to load logs: {e.message}",
        )


@router.post("/", response_model=FitnessLogResponse, status_code=status.HTTP_201_CREATED)
async def create_log(
    payload: FitnessLogCreate,
    user_id: str = Depends(get_user_id),
    store: LogStore = Depends(get_log_store),
) -> FitnessLogResponse:
    """
    Record a check-in.

    Omitted duration and calories are stored as 0, an omitted weight as
    not recorded. The session date defaults to now.

    Args:
        payload: Check-in details
        user_id: Identity the check-in belongs to
        store: Log store

    Returns:
        The stored check-in

    Raises:
        HTTPException: 502 if the log store request fails
    """
    try:
        log = await store.create_log(user_id, payload)
    except LogStoreError as e:
        logger.error(f"Error creating log for user {user_id}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to save log: {e.message}",
        )

    logger.info(f"Created {log.type.value} log {log.id} for user {user_id}")
    return log


@router.delete("/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_log(
    log_id: str,
    user_id: str = Depends(get_user_id),
    store: LogStore = Depends(get_log_store),
) -> None:
    """
    Delete a check-in.

    Raises:
        HTTPException: 404 if the log doesn't exist or belongs to another user
        HTTPException: 502 if the log store request fails
    """
    try:
        await store.delete_log(user_id, log_id)
    except LogNotFoundError as e:
        logger.warning(f"Log {log_id} not found for user {user_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except LogStoreError as e:
        logger.error(f"Error deleting log {log_id} for user {user_id}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to delete log: {e.message}",
        )

    logger.info(f"Deleted log {log_id} for user {user_id}")
