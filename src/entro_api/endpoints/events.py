"""Custom event data and session data properties."""

from __future__ import annotations

from typing import Any, Optional

from ..client import ParamValue
from ..models import ApiResponse
from .base import EndpointGroup, date_range


class EventsAPI(EndpointGroup):
    async def get_event_data_stats(
        self, website_id: str, start_at: int, end_at: int, **params: ParamValue
    ) -> ApiResponse[Any]:
        query = date_range(start_at, end_at, **params)
        return await self._client.get(f"/websites/{website_id}/event-data/stats", query)

    async def get_event_data_events(
        self, website_id: str, start_at: int, end_at: int, **params: ParamValue
    ) -> ApiResponse[Any]:
        """Distinct event names with their totals."""
        query = date_range(start_at, end_at, **params)
        return await self._client.get(f"/websites/{website_id}/event-data/events", query)

    async def get_event_data_fields(
        self, website_id: str, event_name: str, start_at: int, end_at: int, **params: ParamValue
    ) -> ApiResponse[Any]:
        query = date_range(start_at, end_at, eventName=event_name, **params)
        return await self._client.get(f"/websites/{website_id}/event-data/fields", query)

    async def get_event_data_values(
        self,
        website_id: str,
        event_name: str,
        field_name: str,
        start_at: int,
        end_at: int,
        **params: ParamValue,
    ) -> ApiResponse[Any]:
        query = date_range(start_at, end_at, eventName=event_name, fieldName=field_name, **params)
        return await self._client.get(f"/websites/{website_id}/event-data/values", query)

    async def get_event_data_properties(
        self,
        website_id: str,
        start_at: int,
        end_at: int,
        *,
        event_name: Optional[str] = None,
        **params: ParamValue,
    ) -> ApiResponse[Any]:
        query = date_range(start_at, end_at, eventName=event_name, **params)
        return await self._client.get(f"/websites/{website_id}/event-data/properties", query)

    async def get_event_data(self, website_id: str, event_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/event-data/{event_id}")

    async def get_session_data_properties(
        self, website_id: str, start_at: int, end_at: int, **params: ParamValue
    ) -> ApiResponse[Any]:
        query = date_range(start_at, end_at, **params)
        return await self._client.get(f"/websites/{website_id}/session-data/properties", query)

    async def get_session_data_values(
        self, website_id: str, property_name: str, start_at: int, end_at: int, **params: ParamValue
    ) -> ApiResponse[Any]:
        query = date_range(start_at, end_at, propertyName=property_name, **params)
        return await self._client.get(f"/websites/{website_id}/session-data/values", query)


__all__ = ["EventsAPI"]
