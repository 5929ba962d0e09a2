"""Instance administration. Every call needs an admin credential."""

from __future__ import annotations

from typing import Any

from ..models import ApiResponse
from .base import EndpointGroup


class AdminAPI(EndpointGroup):
    async def get_orgs(self) -> ApiResponse[Any]:
        return await self._client.get("/admin/orgs")

    async def get_org(self, org_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/admin/orgs/{org_id}")

    async def get_users(self) -> ApiResponse[Any]:
        return await self._client.get("/admin/users")

    async def get_user(self, user_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/admin/users/{user_id}")

    async def get_websites(self) -> ApiResponse[Any]:
        return await self._client.get("/admin/websites")

    async def get_website(self, website_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/admin/websites/{website_id}")

    async def setup(self) -> ApiResponse[Any]:
        return await self._client.post("/admin/setup", {})


__all__ = ["AdminAPI"]
