"""Plan usage, entitlements and Stripe sessions."""

from __future__ import annotations

from typing import Any, Dict

from ..models import ApiResponse
from .base import EndpointGroup


class BillingAPI(EndpointGroup):
    async def get_usage(self) -> ApiResponse[Any]:
        return await self._client.get("/billing/usage")

    async def get_entitlements(self) -> ApiResponse[Any]:
        return await self._client.get("/billing/entitlements")

    async def get_subscription(self) -> ApiResponse[Any]:
        return await self._client.get("/billing/subscription")

    async def create_checkout_session(self, options: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post("/billing/checkout", options)

    async def create_portal_session(self) -> ApiResponse[Any]:
        return await self._client.post("/billing/portal")


__all__ = ["BillingAPI"]
