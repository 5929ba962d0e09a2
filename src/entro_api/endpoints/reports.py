"""Saved reports and ad-hoc report runs.

Every ``run_*`` method posts ``{"websiteId", "parameters", "filters"}`` to
``/reports/<kind>``. ``parameters`` carries the date range as
``startDate``/``endDate`` plus the report's own options; any extra keyword
arguments are sent as ``filters``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import ApiResponse
from .base import EndpointGroup


class ReportsAPI(EndpointGroup):
    async def get_reports(self, website_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/reports")

    async def create_report(self, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post("/reports", data)

    async def get_report(self, report_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/reports/{report_id}")

    async def update_report(self, report_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(f"/reports/{report_id}", data)

    async def delete_report(self, report_id: str) -> ApiResponse[Any]:
        return await self._client.delete(f"/reports/{report_id}")

    async def _run(
        self,
        kind: str,
        website_id: str,
        start_at: int,
        end_at: int,
        filters: Dict[str, Any],
        **parameters: Any,
    ) -> ApiResponse[Any]:
        body = {
            "websiteId": website_id,
            "parameters": {
                "startDate": start_at,
                "endDate": end_at,
                **{key: value for key, value in parameters.items() if value is not None},
            },
            "filters": filters,
        }
        return await self._client.post(f"/reports/{kind}", body)

    async def run_funnel_report(
        self,
        website_id: str,
        start_at: int,
        end_at: int,
        steps: List[Dict[str, str]],
        *,
        window: int = 30,
        **filters: Any,
    ) -> ApiResponse[Any]:
        """Steps are ``{"type": "path" | "event", "value": ...}`` mappings; ``window`` is in minutes."""
        return await self._run("funnel", website_id, start_at, end_at, filters, window=window, steps=steps)

    async def run_retention_report(
        self, website_id: str, start_at: int, end_at: int, *, timezone: Optional[str] = None, **filters: Any
    ) -> ApiResponse[Any]:
        return await self._run("retention", website_id, start_at, end_at, filters, timezone=timezone)

    async def run_journey_report(
        self,
        website_id: str,
        start_at: int,
        end_at: int,
        *,
        steps: int = 5,
        start_step: Optional[str] = None,
        end_step: Optional[str] = None,
        **filters: Any,
    ) -> ApiResponse[Any]:
        return await self._run(
            "journey",
            website_id,
            start_at,
            end_at,
            filters,
            steps=steps,
            startStep=start_step,
            endStep=end_step,
        )

    async def run_goal_report(
        self, website_id: str, start_at: int, end_at: int, goal_type: str, value: str, **filters: Any
    ) -> ApiResponse[Any]:
        return await self._run("goal", website_id, start_at, end_at, filters, type=goal_type, value=value)

    async def run_attribution_report(
        self,
        website_id: str,
        start_at: int,
        end_at: int,
        *,
        model: str,
        step_type: str,
        step: str,
        currency: Optional[str] = None,
        **filters: Any,
    ) -> ApiResponse[Any]:
        """``model`` is ``first-click`` or ``last-click``; ``step_type`` is ``path`` or ``event``."""
        return await self._run(
            "attribution",
            website_id,
            start_at,
            end_at,
            filters,
            model=model,
            type=step_type,
            step=step,
            currency=currency,
        )

    async def run_revenue_report(
        self, website_id: str, start_at: int, end_at: int, *, currency: str = "USD", **filters: Any
    ) -> ApiResponse[Any]:
        return await self._run("revenue", website_id, start_at, end_at, filters, currency=currency)

    async def run_utm_report(self, website_id: str, start_at: int, end_at: int, **filters: Any) -> ApiResponse[Any]:
        return await self._run("utm", website_id, start_at, end_at, filters)

    async def run_breakdown_report(
        self, website_id: str, start_at: int, end_at: int, prop: str, **filters: Any
    ) -> ApiResponse[Any]:
        """Break visitors and pageviews down by ``prop`` (path, referrer, browser, country, ...)."""
        return await self._run("breakdown", website_id, start_at, end_at, filters, property=prop)


__all__ = ["ReportsAPI"]
