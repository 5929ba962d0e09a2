"""CLI access token management."""

from __future__ import annotations

from typing import Any

from ..models import ApiResponse
from .base import EndpointGroup


class AuthAPI(EndpointGroup):
    async def list_cli_tokens(self) -> ApiResponse[Any]:
        return await self._client.get("/auth/cli/tokens")

    async def revoke_cli_token(self, jti: str) -> ApiResponse[Any]:
        """Revoke one CLI access token by its JWT id."""
        return await self._client.request("/auth/cli/tokens", method="DELETE", body={"jti": jti})

    async def revoke_all_cli_tokens(self) -> ApiResponse[Any]:
        return await self._client.request("/auth/cli/tokens", method="DELETE", body={"revokeAll": True})


__all__ = ["AuthAPI"]
