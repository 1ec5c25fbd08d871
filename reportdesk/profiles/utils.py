"""
Data-access functions for the profiles table. Profile ids are auth user ids.
"""

import logging
from typing import Dict, Optional
from reportdesk.authentication.schemas import UserContext
from reportdesk.database.supabase_client import execute, get_supabase_client
from reportdesk.errors.exceptions import NotFoundError, StoreError, UnauthenticatedError, ValidationError

logger = logging.getLogger(__name__)

TABLE = "profiles"
EDITABLE_FIELDS = ("full_name", "avatar_url")


def _require_id(profile_id: Optional[str]) -> str:
    if profile_id is None or not str(profile_id).strip():
        raise ValidationError("Profile id is required")
    return str(profile_id).strip()


def _profile_row(data: Dict) -> Dict:
    row = {"id": _require_id(data.get("id"))}
    for field in EDITABLE_FIELDS:
        if field in data:
            value = data[field]
            row[field] = value.strip() if isinstance(value, str) else value
    return row


def create_profile(data: Dict) -> Dict:
    row = _profile_row(data)
    created = execute(get_supabase_client().table(TABLE).insert(row), "create profile")
    if not created:
        raise StoreError("Store returned no row for the created profile")
    logger.info(f"Created profile {row['id']}")
    return created[0]


def upsert_profile(data: Dict) -> Dict:
    """Create the profile or overwrite the given fields of an existing one."""
    row = _profile_row(data)
    saved = execute(get_supabase_client().table(TABLE).upsert(row), "save profile")
    if not saved:
        raise StoreError("Store returned no row for the saved profile")
    return saved[0]


def get_profile(profile_id: str) -> Dict:
    profile_id = _require_id(profile_id)
    rows = execute(get_supabase_client().table(TABLE).select("*").eq("id", profile_id), "load profile")
    if not rows:
        raise NotFoundError("Profile", profile_id)
    return rows[0]


def update_profile(profile_id: str, updates: Dict) -> Dict:
    profile_id = _require_id(profile_id)
    changes = {k: v for k, v in updates.items() if k in EDITABLE_FIELDS}
    if not changes:
        raise ValidationError("Nothing to update")

    query = get_supabase_client().table(TABLE).update(changes).eq("id", profile_id)
    rows = execute(query, "update profile")
    if not rows:
        raise NotFoundError("Profile", profile_id)
    return rows[0]


def get_current_user_profile(user: Optional[UserContext]) -> Optional[Dict]:
    """Profile of the session user; None while that user has no profile row."""
    if user is None or user.is_guest:
        raise UnauthenticatedError("No active session")

    query = get_supabase_client().table(TABLE).select("*").eq("id", user.user_id)
    rows = execute(query, "load current profile")
    return rows[0] if rows else None
