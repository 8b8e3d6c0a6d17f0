"""
Request identity.

The tracker has no accounts or authentication. Requests name the user
they act for in the X-User-Id header; without it the configured
default identity is used.
"""

import logging
from typing import Optional

from fastapi import Header

from fitstreak.config import settings

logger = logging.getLogger(__name__)


async def get_user_id(
    x_user_id: Optional[str] = Header(None, description="Identity the request acts for"),
) -> str:
    """
    FastAPI dependency returning the identity to pass to the log store.

    Example:
        >>> @router.get("/logs")
        ... async def list_logs(user_id: str = Depends(get_user_id)):
        ...     ...
    """
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()

    logger.debug(f"No X-User-Id header, using default user {settings.DEFAULT_USER_ID}")
    return settings.DEFAULT_USER_ID
