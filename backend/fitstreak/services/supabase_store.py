"""
Supabase log store.

Reads and writes check-ins in a hosted Supabase table through its
PostgREST interface. Each call is a single request: failures are
reported to the caller and never retried here.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from fitstreak.schemas.fitness_log import FitnessLogCreate, FitnessLogResponse
from fitstreak.services.log_store import LogNotFoundError, LogStore, LogStoreError

logger = logging.getLogger(__name__)


class SupabaseLogStore(LogStore):
    """
    Log store backed by a Supabase table.

    Attributes:
        base_url: Project URL, e.g. https://xyz.supabase.co
        api_key: Project API key, sent as both apikey and bearer token
        table: Table holding the check-ins
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        table: str = "fitness_logs",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not base_url:
            raise LogStoreError("SUPABASE_URL is not configured")
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.table = table
        self.timeout = timeout
        self.transport = transport

    @property
    def table_url(self) -> str:
        return f"{self.base_url}/rest/v1/{self.table}"

    def _headers(self, prefer: Optional[str] = None) -> dict:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    async def _make_request(
        self,
        method: str,
        params: dict = None,
        json: Any = None,
        prefer: Optional[str] = None,
    ) -> Any:
        """
        Send one request to the table endpoint.

        Args:
            method: HTTP method (GET, POST, DELETE)
            params: PostgREST query parameters (filters, ordering)
            json: Optional JSON request body
            prefer: Optional PostgREST Prefer header value

        Returns:
            Parsed JSON response (a list of rows for table calls)

        Raises:
            LogStoreError: On HTTP errors, timeouts and transport failures
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.request(
                    method=method,
                    url=self.table_url,
                    headers=self._headers(prefer),
                    params=params,
                    json=json,
                )
            except httpx.TimeoutException:
                logger.error(f"Supabase request timed out: {method} {self.table}")
                raise LogStoreError("Request timed out", status_code=408)
            except httpx.RequestError as e:
                logger.error(f"Supabase request error: {str(e)}")
                raise LogStoreError(f"Request failed: {str(e)}")

        if response.status_code >= 400:
            try:
                error_body = response.json()
            except ValueError:
                error_body = {"raw": response.text}
            if not isinstance(error_body, dict):
                error_body = {"raw": error_body}

            error_message = error_body.get("message", f"HTTP {response.status_code}")
            logger.error(f"Supabase error: {response.status_code} - {error_message}")
            raise LogStoreError(
                message=error_message,
                status_code=response.status_code,
                response_body=error_body,
            )

        if not response.content:
            return []
        return response.json()

    def _parse_rows(self, rows: Any) -> list[FitnessLogResponse]:
        if not isinstance(rows, list):
            raise LogStoreError(f"Unexpected response from Supabase: {type(rows).__name__}")
        try:
            return [FitnessLogResponse.model_validate(row) for row in rows]
        except ValidationError as e:
            raise LogStoreError(f"Malformed log record from Supabase: {str(e)}")

    async def list_logs(self, user_id: str) -> list[FitnessLogResponse]:
        rows = await self._make_request(
            "GET",
            params={
                "select": "*",
                "user_id": f"eq.{user_id}",
                "order": "date.desc",
            },
        )
        logs = self._parse_rows(rows)
        logger.debug(f"Fetched {len(logs)} logs for user {user_id}")
        return logs

    async def create_log(self, user_id: str, payload: FitnessLogCreate) -> FitnessLogResponse:
        session_date = payload.date or datetime.now(timezone.utc)
        if session_date.tzinfo is None:
            # Naive timestamps are UTC, as in the SQL store
            session_date = session_date.replace(tzinfo=timezone.utc)

        new_log = {
            "user_id": user_id,
            "date": session_date.isoformat(),
            "checked_in": True,
            "duration": payload.duration,
            "type": payload.type.value,
            "calories": payload.calories,
            "weight": payload.weight,
        }
        rows = await self._make_request("POST", json=[new_log], prefer="return=representation")
        created = self._parse_rows(rows)
        if not created:
            raise LogStoreError("Supabase did not return the created log")
        return created[0]

    async def delete_log(self, user_id: str, log_id: str) -> None:
        rows = await self._make_request(
            "DELETE",
            params={
                "id": f"eq.{log_id}",
                "user_id": f"eq.{user_id}",
            },
            prefer="return=representation",
        )
        if not rows:
            raise LogNotFoundError(log_id)
