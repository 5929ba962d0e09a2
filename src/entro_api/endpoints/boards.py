"""Dashboards (boards) and their widgets."""

from __future__ import annotations

from typing import Any, Dict

from ..models import ApiResponse
from .base import EndpointGroup


class BoardsAPI(EndpointGroup):
    async def get_boards(self, website_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/websites/{website_id}/boards")

    async def get_board(self, board_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/boards/{board_id}")

    async def create_board(self, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post("/boards", data)

    async def update_board(self, board_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(f"/boards/{board_id}", data)

    async def delete_board(self, board_id: str) -> ApiResponse[Any]:
        return await self._client.delete(f"/boards/{board_id}")

    async def get_board_widgets(self, board_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/boards/{board_id}/widgets")

    async def get_board_widget(self, board_id: str, widget_id: str) -> ApiResponse[Any]:
        return await self._client.get(f"/boards/{board_id}/widgets/{widget_id}")

    async def create_board_widget(self, board_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(f"/boards/{board_id}/widgets", data)

    async def update_board_widget(self, board_id: str, widget_id: str, data: Dict[str, Any]) -> ApiResponse[Any]:
        return await self._client.post(f"/boards/{board_id}/widgets/{widget_id}", data)

    async def delete_board_widget(self, board_id: str, widget_id: str) -> ApiResponse[Any]:
        return await self._client.delete(f"/boards/{board_id}/widgets/{widget_id}")


__all__ = ["BoardsAPI"]
