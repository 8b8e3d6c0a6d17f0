"""
Fitness log storage.

A log store is the only place check-ins are read from or written to.
Every call takes the caller's identity explicitly; stores never fall
back to a default user on their own.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fitstreak.config import settings
from fitstreak.database import get_db
from fitstreak.models.fitness_log import FitnessLog
from fitstreak.schemas.fitness_log import FitnessLogCreate, FitnessLogResponse

logger = logging.getLogger(__name__)


class LogStoreError(Exception):
    """Exception raised when the log store cannot complete a request."""

    def __init__(self, message: str, status_code: int = None, response_body: dict = None):
        self.message = message
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(self.message)


class LogNotFoundError(LogStoreError):
    """Exception raised when a log does not exist for the given user."""

    def __init__(self, log_id: str):
        self.log_id = log_id
        super().__init__(f"Log with id {log_id} not found", status_code=404)


class LogStore(ABC):
    """Interface shared by all log store backends."""

    @abstractmethod
    async def list_logs(self, user_id: str) -> list[FitnessLogResponse]:
        """Return every log for the user, newest first."""

    @abstractmethod
    async def create_log(self, user_id: str, payload: FitnessLogCreate) -> FitnessLogResponse:
        """Store a new check-in and return it as stored."""

    @abstractmethod
    async def delete_log(self, user_id: str, log_id: str) -> None:
        """Delete one of the user's logs; raises LogNotFoundError if absent."""


class SQLLogStore(LogStore):
    """Log store backed by the application's SQLAlchemy database."""

    def __init__(self, db: Session):
        self.db = db

    async def list_logs(self, user_id: str) -> list[FitnessLogResponse]:
        try:
            logs = (
                self.db.query(FitnessLog)
                .filter(FitnessLog.user_id == user_id)
                .order_by(FitnessLog.date.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to list logs for user {user_id}: {str(e)}")
            raise LogStoreError(f"Failed to load logs: {str(e)}")

        logger.debug(f"Loaded {len(logs)} logs for user {user_id}")
        return [FitnessLogResponse.model_validate(log) for log in logs]

    async def create_log(self, user_id: str, payload: FitnessLogCreate) -> FitnessLogResponse:
        session_date = payload.date or datetime.now(timezone.utc)
        if session_date.tzinfo is not None:
            # SQLite drops the offset, so store everything as UTC
            session_date = session_date.astimezone(timezone.utc)

        log = FitnessLog(
            user_id=user_id,
            date=session_date,
            checked_in=True,
            duration=payload.duration,
            type=payload.type,
            calories=payload.calories,
            weight=payload.weight,
        )
        try:
            self.db.add(log)
            self.db.commit()
            self.db.refresh(log)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create log for user {user_id}: {str(e)}")
            raise LogStoreError(f"Failed to save log: {str(e)}")

        return FitnessLogResponse.model_validate(log)

    async def delete_log(self, user_id: str, log_id: str) -> None:
        try:
            log = self.db.query(FitnessLog).filter(
                FitnessLog.id == log_id,
                FitnessLog.user_id == user_id
            ).first()

            if not log:
                raise LogNotFoundError(log_id)

            self.db.delete(log)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete log {log_id} for user {user_id}: {str(e)}")
            raise LogStoreError(f"Failed to delete log: {str(e)}")


def get_log_store(db: Session = Depends(get_db)) -> LogStore:
    """Dependency returning the log store selected by LOG_STORE_BACKEND."""
    backend = settings.LOG_STORE_BACKEND.lower()

    if backend == "sql":
        return SQLLogStore(db)

    if backend == "supabase":
        # Import here to avoid circular dependencies
        from fitstreak.services.supabase_store import SupabaseLogStore

        return SupabaseLogStore(
            base_url=settings.SUPABASE_URL,
            api_key=settings.SUPABASE_KEY,
            table=settings.SUPABASE_TABLE,
            timeout=settings.SUPABASE_TIMEOUT,
        )

    raise LogStoreError(f"Unknown log store backend: {settings.LOG_STORE_BACKEND}")
