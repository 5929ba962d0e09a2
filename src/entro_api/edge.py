"""Helpers for deployments on edge platforms (Vercel, Netlify, Cloudflare)."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from .config import ConfigurationError, EnvLookup, environ_lookup
from .runtime import Runtime, detect_runtime

logger = logging.getLogger("entro_api.edge")


async def _sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)


def get_env(key: str, default: Optional[str] = None, *, lookup: EnvLookup = environ_lookup) -> Optional[str]:
    value = lookup(key)
    return default if value is None else value


def require_env(key: str, *, lookup: EnvLookup = environ_lookup) -> str:
    value = lookup(key)
    if not value:
        raise ConfigurationError(f"Required environment variable {key} is not set")
    return value


@dataclass(frozen=True)
class RegionInfo:
    provider: str
    region: Optional[str] = None
    is_edge: bool = False


def get_region_info(lookup: EnvLookup = environ_lookup, runtime: Optional[Runtime] = None) -> RegionInfo:
    runtime = runtime or detect_runtime()
    if lookup("VERCEL"):
        return RegionInfo(
            provider="vercel",
            region=lookup("VERCEL_REGION"),
            is_edge=lookup("VERCEL_EDGE_RUNTIME") == "1",
        )
    if lookup("NETLIFY"):
        return RegionInfo(
            provider="netlify",
            region=lookup("NETLIFY_REGION"),
            is_edge=runtime is Runtime.CONSTRAINED,
        )
    if runtime is Runtime.CONSTRAINED:
        # Cloudflare does not expose the region to workers
        return RegionInfo(provider="cloudflare", region=None, is_edge=True)
    return RegionInfo(provider="unknown")


@dataclass(frozen=True)
class GeoInfo:
    country: Optional[str] = None
    region: Optional[str] = None
    city: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None


def _headers_of(source: Any) -> httpx.Headers:
    return httpx.Headers(getattr(source, "headers", source))


def get_geo_from_request(request: Any) -> GeoInfo:
    """Extract geo headers set by the platform from an incoming request or header mapping."""
    headers = _headers_of(request)

    country = headers.get("x-vercel-ip-country")
    if country:
        return GeoInfo(
            country=country,
            region=headers.get("x-vercel-ip-country-region"),
            city=headers.get("x-vercel-ip-city"),
            latitude=headers.get("x-vercel-ip-latitude"),
            longitude=headers.get("x-vercel-ip-longitude"),
        )

    country = headers.get("cf-ipcountry")
    if country:
        return GeoInfo(
            country=country,
            region=headers.get("cf-region"),
            city=headers.get("cf-city"),
            latitude=headers.get("cf-latitude"),
            longitude=headers.get("cf-longitude"),
        )

    return GeoInfo()


def get_client_ip(request: Any) -> Optional[str]:
    headers = _headers_of(request)
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return (
        headers.get("x-real-ip")
        or headers.get("cf-connecting-ip")
        or headers.get("x-vercel-forwarded-for")
        or None
    )


class EdgeFetch:
    """Async fetch with timeout and retries, usable as ``ClientConfig.fetch``.

    2xx and 4xx responses are returned as-is. Other statuses and transport
    errors are retried with exponential backoff; a timeout is raised at once.
    """

    def __init__(
        self,
        *,
        retries: int = 3,
        retry_delay: float = 1000.0,
        timeout: float = 30000.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.retries = retries
        self.retry_delay = retry_delay
        self.timeout = timeout
        self._client = httpx.AsyncClient(transport=transport, timeout=timeout / 1000, follow_redirects=True)

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        response: Optional[httpx.Response] = None
        last_exc: Optional[httpx.TransportError] = None

        for attempt in range(self.retries + 1):
            try:
                # the timeout bounds the whole attempt, body included
                response = await asyncio.wait_for(self._send(request), self.timeout / 1000)
            except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
                raise TimeoutError(f"Request timeout after {self.timeout:g}ms") from exc
            except httpx.TransportError as exc:
                response, last_exc = None, exc
            else:
                if response.is_success or 400 <= response.status_code < 500:
                    return response
                last_exc = None

            if attempt < self.retries:
                delay = self.retry_delay * 2**attempt
                logger.debug("Edge fetch retry %s %s in %sms", request.method, request.url, delay)
                await _sleep(delay / 1000)

        if response is not None:
            response.raise_for_status()
        if last_exc is not None:
            raise last_exc
        raise httpx.RequestError("Request failed", request=request)

    async def _send(self, request: httpx.Request) -> httpx.Response:
        response = await self._client.send(request)
        await response.aread()
        return response

    async def aclose(self) -> None:
        await self._client.aclose()


def create_edge_fetch(
    *,
    retries: int = 3,
    retry_delay: float = 1000.0,
    timeout: float = 30000.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> EdgeFetch:
    return EdgeFetch(retries=retries, retry_delay=retry_delay, timeout=timeout, transport=transport)


__all__ = [
    "EdgeFetch",
    "GeoInfo",
    "RegionInfo",
    "create_edge_fetch",
    "get_client_ip",
    "get_env",
    "get_geo_from_request",
    "get_region_info",
    "require_env",
]
