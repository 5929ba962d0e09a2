"""Short links and tracking pixels. Both are owned by an organization."""

from __future__ import annotations

from typing import Any, Dict

from ..models import ApiResponse
from .base import EndpointGroup


class LinksAPI(EndpointGroup):
    async def get_links(self) -> ApiResponse[Any]:
        return await self._client.get("/links")

    async def get_org_links(self, org_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/orgs/{org_id}/links")

    async def create_link(self, org_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(f"/orgs/{org_id}/links", data)

    async def get_link(self, link_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/links/{link_id}")

    async def update_link(self, link_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(f"/links/{link_id}", data)

    async def delete_link(self, link_id: str) -> ApiResponse[Any]:
        return await self._client.delete(f"/links/{link_id}")


class PixelsAPI(EndpointGroup):
    async def get_pixels(self) -> ApiResponse[Any]:
        return await self._client.get("/pixels")

    async def get_org_pixels(self, org_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/orgs/{org_id}/pixels")

    async def create_pixel(self, org_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(f"/orgs/{org_id}/pixels", data)

    async def get_pixel(self, pixel_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/pixels/{pixel_id}")

    async def update_pixel(self, pixel_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(f"/pixels/{pixel_id}", data)

    async def delete_pixel(self, pixel_id: str) -> ApiResponse[Any]:
        return await self._client.delete(f"/pixels/{pixel_id}")


__all__ = ["LinksAPI", "PixelsAPI"]
