"""Bearer token authentication for API routes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import Depends, Header, HTTPException, Request, status

from meal_planner.adapters.supabase_auth_client import TokenVerifier  # noqa: TC001

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

_BEARER_PREFIX = "bearer "

_logger = logging.getLogger(__name__)


class TokenVerificationError(Exception):
    """The token verifier failed before reaching a verdict."""


def _get_token_verifier(request: Request) -> TokenVerifier:
    container: AppContainer = request.app.state.container
    return container.token_verifier


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def require_user(
    authorization: str | None = Header(default=None),
    verifier: TokenVerifier = Depends(_get_token_verifier),
) -> str:
    """Resolve the bearer token to the caller's user id."""
    if not authorization or not authorization.lower().startswith(_BEARER_PREFIX):
        raise _unauthorized("Access token required")
    token = authorization[len(_BEARER_PREFIX) :].strip()
    if not token:
        raise _unauthorized("Access token required")
    try:
        user_id = await verifier.verify(token)
    except Exception as exc:
        _logger.exception("Token verification failed")
        raise TokenVerificationError(str(exc)) from exc
    if not user_id:
        raise _unauthorized("Invalid or expired token")
    return user_id
