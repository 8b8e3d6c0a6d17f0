"""Tests for log store selection and the SQL store."""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from fitstreak.schemas.fitness_log import FitnessLogCreate
from fitstreak.services import log_store
from fitstreak.services.log_store import LogNotFoundError, LogStoreError, SQLLogStore, get_log_store
from fitstreak.services.supabase_store import SupabaseLogStore


class TestGetLogStore:
    def test_sql_backend(self, monkeypatch, db_session):
        monkeypatch.setattr(log_store.settings, "LOG_STORE_BACKEND", "sql")
        assert isinstance(get_log_store(db_session), SQLLogStore)

    def test_supabase_backend(self, monkeypatch, db_session):
        monkeypatch.setattr(log_store.settings, "LOG_STORE_BACKEND", "Supabase")
        monkeypatch.setattr(log_store.settings, "SUPABASE_URL", "https://demo.supabase.co")
        monkeypatch.setattr(log_store.settings, "SUPABASE_TABLE", "checkins")

        store = get_log_store(db_session)

        assert isinstance(store, SupabaseLogStore)
        assert store.table_url == "https://demo.supabase.co/rest/v1/checkins"

    def test_unknown_backend(self, monkeypatch, db_session):
        monkeypatch.setattr(log_store.settings, "LOG_STORE_BACKEND", "csv")
        with pytest.raises(LogStoreError):
            get_log_store(db_session)


class TestSQLLogStore:
    def test_round_trip_keeps_utc_day(self, db_session):
        store = SQLLogStore(db_session)
        # 01:30 at +08:00 is still the previous day in UTC
        local = datetime(2026, 1, 15, 1, 30, tzinfo=timezone(timedelta(hours=8)))

        asyncio.run(store.create_log("myself", FitnessLogCreate(date=local, weight=70.0)))
        logs = asyncio.run(store.list_logs("myself"))

        assert len(logs) == 1
        stored = logs[0].date.replace(tzinfo=logs[0].date.tzinfo or timezone.utc)
        assert stored == local
        assert stored.astimezone(timezone.utc).day == 14
        assert logs[0].checked_in is True

    def test_delete_unknown(self, db_session):
        store = SQLLogStore(db_session)
        with pytest.raises(LogNotFoundError):
            asyncio.run(store.delete_log("myself", "missing"))
