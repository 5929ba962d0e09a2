"""User administration endpoints."""

from __future__ import annotations

from typing import Any, Dict

from ..models import ApiResponse
from .base import EndpointGroup, date_range


class UsersAPI(EndpointGroup):
    async def get_users(self) -> ApiResponse[Any]:
        return await self._client.get("/users")

    async def create_user(self, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post("/users", data)

    async def get_user(self, user_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/users/{user_id}")

    async def update_user(self, user_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(f"/users/{user_id}", data)

    async def delete_user(self, user_id: str) -> ApiResponse[Any]:
        return await self._client.delete(f"/users/{user_id}")

    async def get_user_websites(self, user_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/users/{user_id}/websites")

    async def get_user_usage(self, user_id: str, start_at: int, end_at: int) -> ApiResponse[Any]:
        return await self._client.get(f"/users/{user_id}/usage", date_range(start_at, end_at))


__all__ = ["UsersAPI"]
