"""Configuration objects for the Entrolytics Python SDK."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

import httpx

ENDPOINT_ENV = "ENTROLYTICS_API_ENDPOINT"
BEARER_TOKEN_ENV = "ENTROLYTICS_BEARER_TOKEN"
API_KEY_ENV = "ENTROLYTICS_API_KEY"
USER_ID_ENV = "ENTROLYTICS_USER_ID"
SECRET_ENV = "ENTROLYTICS_SECRET"

API_KEY_HEADER = "x-entrolytics-api-key"
SHARE_TOKEN_HEADER = "x-entrolytics-share-token"

Fetch = Callable[[httpx.Request], Awaitable[httpx.Response]]
EnvLookup = Callable[[str], Optional[str]]


class ConfigurationError(ValueError):
    """Raised for programmer-side misconfiguration of the client."""


def environ_lookup(key: str) -> Optional[str]:
    # Runtimes without a process environment simply yield nothing.
    environ = getattr(os, "environ", None)
    if environ is None:
        return None
    return environ.get(key)


@dataclass(frozen=True)
class ClientConfig:
    endpoint: Optional[str] = None
    bearer_token: Optional[str] = None
    api_key: Optional[str] = None
    user_id: Optional[str] = None
    secret: Optional[str] = None
    fetch: Optional[Fetch] = None
    transport: Optional[httpx.AsyncBaseTransport] = None
    timeout: float = 30.0
    retries: Optional[int] = None
    retry_delay: Optional[float] = None


__all__ = [
    "API_KEY_ENV",
    "API_KEY_HEADER",
    "BEARER_TOKEN_ENV",
    "ClientConfig",
    "ConfigurationError",
    "ENDPOINT_ENV",
    "EnvLookup",
    "Fetch",
    "SECRET_ENV",
    "SHARE_TOKEN_HEADER",
    "USER_ID_ENV",
    "environ_lookup",
]
