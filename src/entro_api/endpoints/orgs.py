"""Organization and membership endpoints."""

from __future__ import annotations

from typing import Any, Dict

from ..models import ApiResponse
from .base import EndpointGroup


class OrgsAPI(EndpointGroup):
    async def get_orgs(self) -> ApiResponse[Any]:
        return await self._client.get("/orgs")

    async def create_org(self, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post("/orgs", data)

    async def join_org(self, access_code: str) -> ApiResponse[Any]:
        return await self._client.post("/orgs/join", {"accessCode": access_code})

    async def get_org(self, org_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/orgs/{org_id}")

    async def update_org(self, org_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(f"/orgs/{org_id}", data)

    async def delete_org(self, org_id: str) -> ApiResponse[Any]:
        return await self._client.delete(f"/orgs/{org_id}")

    async def get_org_users(self, org_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/orgs/{org_id}/users")

    async def add_org_user(self, org_id: str, user_id: str, role: str) -> ApiResponse[Any]:
        return await self._client.post(f"/orgs/{org_id}/users", {"userId": user_id, "role": role})

    async def update_org_user(self, org_id: str, user_id: str, role: str) -> ApiResponse[Any]:
        return await self._client.post(f"/orgs/{org_id}/users/{user_id}", {"role": role})

    async def remove_org_user(self, org_id: str, user_id: str) -> ApiResponse[Any]:
        return await self._client.delete(f"/orgs/{org_id}/users/{user_id}")

    async def get_org_websites(self, org_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/orgs/{org_id}/websites")

    async def add_org_website(self, org_id: str, website_id: str) -> ApiResponse[Any]:
        return await self._client.post(f"/orgs/{org_id}/websites", {"websiteId": website_id})

    async def remove_org_website(self, org_id: str, website_id: str) -> ApiResponse[Any]:
        return await self._client.delete(f"/orgs/{org_id}/websites/{website_id}")


__all__ = ["OrgsAPI"]
