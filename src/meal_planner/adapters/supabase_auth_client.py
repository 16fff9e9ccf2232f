"""Supabase Auth client used to verify bearer tokens."""

from dataclasses import dataclass
from typing import Protocol

import httpx

_REJECTED_STATUSES = {401, 403}


class TokenVerifier(Protocol):
    """Interface for resolving an access token to a user id."""

    async def verify(self, token: str) -> str | None:
        """Return the user id for a valid token, or None when rejected."""


@dataclass
class HttpxSupabaseAuthClient(TokenVerifier):
    """HTTPX-backed verifier calling the Supabase Auth user endpoint."""

    base_url: str
    api_key: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str, api_key: str) -> "HttpxSupabaseAuthClient":
        """Create a verifier with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            api_key=api_key,
            http_client=httpx.AsyncClient(),
        )

    async def verify(self, token: str) -> str | None:
        """Look up the user behind an access token."""
        response = await self.http_client.get(
            f"{self.base_url}/auth/v1/user",
            headers={
                "apikey": self.api_key,
                "Authorization": f"Bearer {token}",
            },
            timeout=10,
        )
        if response.status_code in _REJECTED_STATUSES:
            return None
        response.raise_for_status()
        user_id = response.json().get("id")
        return str(user_id) if user_id else None

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
