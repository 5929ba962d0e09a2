"""Endpoints scoped to the authenticated user."""

from __future__ import annotations

from typing import Any

from ..models import ApiResponse
from .base import EndpointGroup


class MeAPI(EndpointGroup):
    async def get_me(self) -> ApiResponse[Any]:
        return await self._client.get("/me")

    async def update_my_password(self, current_password: str, new_password: str) -> ApiResponse[Any]:
        body = {"currentPassword": current_password, "newPassword": new_password}
        return await self._client.post("/me/password", body)

    async def get_my_websites(self) -> ApiResponse[Any]:
        return await self._client.get("/me/websites")

    async def get_my_orgs(self) -> ApiResponse[Any]:
        return await self._client.get("/me/orgs")


__all__ = ["MeAPI"]
