"""Visitor session endpoints."""

from __future__ import annotations

from typing import Any, Optional

from ..client import ParamValue
from ..models import ApiResponse
from .base import EndpointGroup, date_range


class SessionsAPI(EndpointGroup):
    async def get_website_sessions(
        self, website_id: str, start_at: int, end_at: int, **params: ParamValue
    ) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/sessions", date_range(start_at, end_at, **params))

    async def get_website_session_stats(self, website_id: str, start_at: int, end_at: int) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/sessions/stats", date_range(start_at, end_at))

    async def get_weekly_traffic(
        self, website_id: str, start_at: int, end_at: int, *, timezone: Optional[str] = None
    ) -> ApiResponse[Any]:
        params = date_range(start_at, end_at, timezone=timezone)
        return await self._client.get(f"/websites/{website_id}/sessions/weekly", params)

    async def get_session(self, website_id: str, session_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/sessions/{session_id}")

    async def get_session_activity(
        self, website_id: str, session_id: str, start_at: int, end_at: int
    ) -> ApiResponse[Any]:
        path = f"/websites/{website_id}/sessions/{session_id}/activity"
        return await self._client.get(path, date_range(start_at, end_at))

    async def get_session_properties(self, website_id: str, session_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/sessions/{session_id}/properties")


__all__ = ["SessionsAPI"]
