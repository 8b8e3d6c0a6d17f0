"""API routers package."""

from fitstreak.routers import logs, stats

__all__ = ["logs", "stats"]
