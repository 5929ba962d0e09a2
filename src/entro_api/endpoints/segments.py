"""Saved segments of a website."""

from __future__ import annotations

from typing import Any, Dict

from ..models import ApiResponse
from .base import EndpointGroup


class SegmentsAPI(EndpointGroup):
    async def get_segments(self, website_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/segments")

    async def create_segment(self, website_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(f"/websites/{website_id}/segments", data)

    async def get_segment(self, website_id: str, segment_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/segments/{segment_id}")

    async def update_segment(self, website_id: str, segment_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(f"/websites/{website_id}/segments/{segment_id}", data)

    async def delete_segment(self, website_id: str, segment_id: str) -> ApiResponse[Any]:
        return await self._client.delete(f"/websites/{website_id}/segments/{segment_id}")


__all__ = ["SegmentsAPI"]
