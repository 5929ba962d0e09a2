"""Server configuration and inbound integration hooks."""

from __future__ import annotations

from typing import Any

from ..models import ApiResponse
from .base import EndpointGroup


class ConfigAPI(EndpointGroup):
    async def get(self) -> ApiResponse[Any]:
        return await self._client.get("/config")


class WebhooksAPI(EndpointGroup):
    async def clerk(self, data: Any) -> ApiResponse[Any]:
        return await self._client.post("/webhooks/clerk", data)


class IntegrationsAPI(EndpointGroup):
    async def wordpress(self, data: Any) -> ApiResponse[Any]:
        return await self._client.post("/integrations/wordpress", data)


__all__ = ["ConfigAPI", "IntegrationsAPI", "WebhooksAPI"]
