"""
Identity resolution. The store's auth service is the only source of truth for
who the caller is; the result is handed to data-access calls as a UserContext.
"""

import logging
from typing import Optional

import httpx
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from supabase import AuthError

from reportdesk.authentication.schemas import UserContext
from reportdesk.config import get_settings
from reportdesk.database.supabase_client import get_supabase_client
from reportdesk.errors.exceptions import StoreError, UnauthenticatedError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

SESSION_COOKIE = "sb-access-token"


def resolve_user(token: Optional[str]) -> UserContext:
    """Look up the user behind an access token, or raise UnauthenticatedError."""
    if not token:
        raise UnauthenticatedError()

    try:
        response = get_supabase_client().auth.get_user(token)
    except (AuthError, httpx.HTTPError) as e:
        logger.info(f"Rejected access token: {e}")
        raise UnauthenticatedError("Invalid or expired session") from e

    user = response.user if response else None
    if user is None:
        raise UnauthenticatedError("Invalid or expired session")

    return UserContext(user_id=user.id, email=user.email, role=user.role)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UserContext:
    token = credentials.credentials if credentials else None
    return resolve_user(token)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[UserContext]:
    if credentials is None:
        return None
    return resolve_user(credentials.credentials)


def get_dashboard_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UserContext:
    """
    Session user for the dashboard; falls back to the configured guest identity
    when there is no token, the token is rejected or the auth service fails.
    """
    token = credentials.credentials if credentials else request.cookies.get(SESSION_COOKIE)
    if token:
        try:
            return resolve_user(token)
        except UnauthenticatedError:
            logger.info("Dashboard session token rejected, continuing as guest")
        except StoreError as e:
            logger.warning(f"Could not verify dashboard session ({e.message}), continuing as guest")
    return UserContext(user_id=get_settings().guest_user_id, is_guest=True)
