"""Website management and analytics endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..client import ParamValue
from ..models import ApiResponse
from .base import EndpointGroup, date_range


class WebsitesAPI(EndpointGroup):
    async def get_websites(self) -> ApiResponse[Any]:
        return await self._client.get("/websites")

    async def create_website(self, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post("/websites", data)

    async def get_website(self, website_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}")

    async def update_website(self, website_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(f"/websites/{website_id}", data)

    async def delete_website(self, website_id: str) -> ApiResponse[Any]:
        return await self._client.delete(f"/websites/{website_id}")

    async def reset_website(self, website_id: str) -> ApiResponse[Any]:
        return await self._client.post(f"/websites/{website_id}/reset")

    async def transfer_website(
        self, website_id: str, *, user_id: Optional[str] = None, org_id: Optional[str] = None
    ) -> ApiResponse[Any]:
        body = {key: value for key, value in (("userId", user_id), ("orgId", org_id)) if value is not None}
        return await self._client.post(f"/websites/{website_id}/transfer", body)

    async def get_website_stats(
        self, website_id: str, start_at: int, end_at: int, **params: ParamValue
    ) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/stats", date_range(start_at, end_at, **params))

    async def get_website_pageviews(
        self,
        website_id: str,
        start_at: int,
        end_at: int,
        *,
        unit: Optional[str] = None,
        timezone: Optional[str] = None,
    ) -> ApiResponse[Any]:
        params = date_range(start_at, end_at, unit=unit, timezone=timezone)
        return await self._client.get(f"/websites/{website_id}/pageviews", params)

    async def get_website_metrics(
        self, website_id: str, metric_type: str, start_at: int, end_at: int, **params: ParamValue
    ) -> ApiResponse[Any]:
        query = date_range(start_at, end_at, type=metric_type, **params)
        return await self._client.get(f"/websites/{website_id}/metrics", query)

    async def get_website_expanded_metrics(
        self, website_id: str, metric_type: str, start_at: int, end_at: int, **params: ParamValue
    ) -> ApiResponse[Any]:
        query = date_range(start_at, end_at, type=metric_type, **params)
        return await self._client.get(f"/websites/{website_id}/metrics/expanded", query)

    async def get_website_events(
        self,
        website_id: str,
        start_at: int,
        end_at: int,
        *,
        query: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> ApiResponse[Any]:
        params = date_range(start_at, end_at, query=query, limit=limit, offset=offset)
        return await self._client.get(f"/websites/{website_id}/events", params)

    async def get_website_events_series(
        self,
        website_id: str,
        start_at: int,
        end_at: int,
        *,
        unit: Optional[str] = None,
        timezone: Optional[str] = None,
        event: Optional[str] = None,
    ) -> ApiResponse[Any]:
        params = date_range(start_at, end_at, unit=unit, timezone=timezone, event=event)
        return await self._client.get(f"/websites/{website_id}/events/series", params)

    async def get_website_active(self, website_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/active")

    async def get_website_date_range(self, website_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/daterange")

    async def get_website_values(
        self, website_id: str, value_type: str, start_at: int, end_at: int
    ) -> ApiResponse[Any]:
        params = date_range(start_at, end_at, type=value_type)
        return await self._client.get(f"/websites/{website_id}/values", params)

    async def get_realtime_data(self, website_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/realtime/{website_id}")

    async def export_website_data(
        self, website_id: str, start_at: int, end_at: int, *, export_type: str = "csv"
    ) -> ApiResponse[Any]:
        """Export raw data as ``csv`` or ``json``."""
        params = date_range(start_at, end_at, type=export_type)
        return await self._client.get(f"/websites/{website_id}/export", params)

    # Ingest routing

    async def get_website_mode(self, website_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/mode")

    async def set_website_mode(self, website_id: str, mode: str) -> ApiResponse[Any]:
        """``mode`` is one of ``auto``, ``node`` or ``edge``."""
        return await self._client.post(f"/websites/{website_id}/mode", {"ingestMode": mode})

    async def get_routing_health(self) -> ApiResponse[Any]:
        return await self._client.get("/health/routing")

    async def get_routing_stats(self, start: Optional[str] = None, end: Optional[str] = None) -> ApiResponse[Any]:
        return await self._client.get("/routing/stats", {"start": start, "end": end})

    # Web vitals

    async def get_website_vitals(
        self, website_id: str, start_at: int, end_at: int, **params: ParamValue
    ) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/vitals", date_range(start_at, end_at, **params))

    async def get_website_vital_events(
        self, website_id: str, start_at: int, end_at: int, **params: ParamValue
    ) -> ApiResponse[Any]:
        query = date_range(start_at, end_at, **params)
        return await self._client.get(f"/websites/{website_id}/vitals/events", query)

    async def track_vital(self, website_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post("/collect/vitals", {"website": website_id, **data})

    async def track_vitals_batch(self, website_id: str, vitals: List[Dict[str, Any]]) -> ApiResponse[Any]:
        return await self._client.post("/collect/vitals", {"website": website_id, "vitals": vitals})

    # Form analytics

    async def get_website_forms(
        self, website_id: str, start_at: int, end_at: int, **params: ParamValue
    ) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/forms", date_range(start_at, end_at, **params))

    async def get_form_fields(
        self, website_id: str, form_id: str, start_at: int, end_at: int, **params: ParamValue
    ) -> ApiResponse[Any]:
        query = date_range(start_at, end_at, **params)
        return await self._client.get(f"/websites/{website_id}/forms/{form_id}/fields", query)

    async def get_form_events(
        self, website_id: str, start_at: int, end_at: int, **params: ParamValue
    ) -> ApiResponse[Any]:
        query = date_range(start_at, end_at, **params)
        return await self._client.get(f"/websites/{website_id}/forms/events", query)

    async def track_form_event(self, website_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post("/collect/forms", {"website": website_id, **data})

    async def track_form_events_batch(self, website_id: str, events: List[Dict[str, Any]]) -> ApiResponse[Any]:
        return await self._client.post("/collect/forms", {"website": website_id, "events": events})

    # Deployments

    async def get_website_deployments(self, website_id: str, **params: ParamValue) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/deployments", params)

    async def get_deployment(self, website_id: str, deploy_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/deployments/{deploy_id}")

    async def compare_deployments(
        self, website_id: str, current_deploy_id: str, previous_deploy_id: Optional[str] = None
    ) -> ApiResponse[Any]:
        return await self._client.get(
            f"/websites/{website_id}/deployments/{current_deploy_id}/compare",
            {"previous": previous_deploy_id},
        )

    async def set_deployment(self, website_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(f"/websites/{website_id}/deployments", data)


__all__ = ["WebsitesAPI"]
