"""
Supabase client construction and the single choke point every store query
goes through. Backend failures are logged here and re-raised as StoreError.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, List

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from reportdesk.config import get_settings
from reportdesk.errors.exceptions import StoreError

logger = logging.getLogger(__name__)


@lru_cache
def get_supabase_client() -> Client:
    """Return the process-wide Supabase client built from settings."""
    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_anon_key:
        raise StoreError("Store connection is not configured (SUPABASE_URL / SUPABASE_ANON_KEY).")
    return create_client(settings.supabase_url, settings.supabase_anon_key)


def execute(query: Any, action: str) -> List[Dict[str, Any]]:
    """Run a prepared query builder and return its rows.

    ``action`` names the operation for the log line, e.g. "create report".
    """
    try:
        response = query.execute()
    except APIError as e:
        logger.error(f"Store error while trying to {action}: {e.message}")
        raise StoreError(e.message or f"Failed to {action}") from e
    except httpx.HTTPError as e:
        logger.error(f"Network error while trying to {action}: {e}")
        raise StoreError(str(e) or f"Failed to {action}") from e

    data = response.data
    if data is None:
        return []
    if isinstance(data, dict):
        return [data]
    return list(data)
