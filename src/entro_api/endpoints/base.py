"""Shared base for endpoint groups."""

from __future__ import annotations

from typing import Dict

from ..client import ApiClient, ParamValue


class EndpointGroup:
    def __init__(self, client: ApiClient) -> None:
        self._client = client


def date_range(start_at: int, end_at: int, **extra: ParamValue) -> Dict[str, ParamValue]:
    params: Dict[str, ParamValue] = {"startAt": start_at, "endAt": end_at}
    params.update(extra)
    return params


__all__ = ["EndpointGroup", "date_range"]
