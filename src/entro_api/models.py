"""Pydantic models for the response envelope."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    ok: bool
    status: int
    data: Optional[T] = None
    error: Optional[str] = None


__all__ = ["ApiResponse"]
