from __future__ import annotations

from typing import Callable, Dict, List, Optional

import httpx
import pytest

from entro_api.client import ApiClient
from entro_api.config import ClientConfig

ENDPOINT = "https://api.example.com"


@pytest.fixture()
def make_client() -> Callable[..., ApiClient]:
    def factory(handler: Callable, env: Optional[Dict[str, str]] = None, **overrides) -> ApiClient:
        options = dict(endpoint=ENDPOINT, transport=httpx.MockTransport(handler), retry_delay=1000)
        options.update(overrides)
        return ApiClient(ClientConfig(**options), env=(env or {}).get)

    return factory


@pytest.fixture()
def sleeps(monkeypatch) -> List[float]:
    recorded: List[float] = []

    async def fake_sleep(seconds: float) -> None:
        recorded.append(seconds)

    monkeypatch.setattr("entro_api.client._sleep", fake_sleep)
    monkeypatch.setattr("entro_api.edge._sleep", fake_sleep)
    return recorded
