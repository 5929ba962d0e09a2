"""Async request engine for the Entrolytics REST API."""

from __future__ import annotations

import asyncio
import base64
import json
import logging
import threading
import time
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urljoin

import httpx

from .config import (
    API_KEY_ENV,
    API_KEY_HEADER,
    BEARER_TOKEN_ENV,
    ENDPOINT_ENV,
    SECRET_ENV,
    SHARE_TOKEN_HEADER,
    USER_ID_ENV,
    ClientConfig,
    ConfigurationError,
    EnvLookup,
    environ_lookup,
)
from .metrics import REQUEST_COUNTER, REQUEST_LATENCY, RETRY_COUNTER
from .models import ApiResponse

logger = logging.getLogger("entro_api.client")

ParamValue = Union[str, int, float, bool, None]
Params = Mapping[str, ParamValue]

DEFAULT_RETRIES = 3
DEFAULT_RETRY_DELAY_MS = 1000.0


async def _sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)


def is_retryable(status: int) -> bool:
    return status == 0 or status == 429 or status >= 500


def _stringify(value: Union[str, int, float, bool]) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _parse_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}


def _error_message(data: Any, status: int) -> str:
    if isinstance(data, dict):
        if isinstance(data.get("error"), str):
            return data["error"]
        if isinstance(data.get("message"), str):
            return data["message"]
    return f"HTTP {status}"


class ApiClient:
    """Builds authenticated requests and folds every outcome into an ``ApiResponse``.

    Authentication headers are derived again for every attempt, so a token
    swapped in with ``set_bearer_token`` applies to the next attempt of calls
    that are already retrying as well as to all later calls.
    """

    def __init__(self, config: Optional[ClientConfig] = None, *, env: Optional[EnvLookup] = None) -> None:
        config = config or ClientConfig()
        lookup = env or environ_lookup

        self._endpoint = config.endpoint or lookup(ENDPOINT_ENV) or ""
        self._bearer_token = config.bearer_token or lookup(BEARER_TOKEN_ENV)
        self._api_key = config.api_key or lookup(API_KEY_ENV)
        self._user_id = config.user_id or lookup(USER_ID_ENV)
        self._secret = config.secret or lookup(SECRET_ENV)
        self._retries = DEFAULT_RETRIES if config.retries is None else config.retries
        self._retry_delay = DEFAULT_RETRY_DELAY_MS if config.retry_delay is None else config.retry_delay
        self._token_lock = threading.Lock()

        if not self._endpoint:
            raise ConfigurationError(
                f"Entrolytics API endpoint is required. Set {ENDPOINT_ENV} or pass endpoint in config."
            )

        self._http: Optional[httpx.AsyncClient] = None
        if config.fetch is not None:
            self._fetch = config.fetch
        else:
            self._http = httpx.AsyncClient(
                transport=config.transport, timeout=config.timeout, follow_redirects=True
            )
            self._fetch = self._http.send

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def retries(self) -> int:
        return self._retries

    @property
    def retry_delay(self) -> float:
        return self._retry_delay

    @property
    def bearer_token(self) -> Optional[str]:
        with self._token_lock:
            return self._bearer_token

    def set_bearer_token(self, token: Optional[str]) -> None:
        with self._token_lock:
            self._bearer_token = token

    def get_auth_headers(self) -> Dict[str, str]:
        bearer_token = self.bearer_token
        if bearer_token:
            return {"Authorization": f"Bearer {bearer_token}"}
        if self._api_key:
            return {API_KEY_HEADER: self._api_key}
        if self._user_id and self._secret:
            return {SHARE_TOKEN_HEADER: self.create_share_token()}
        return {}

    def create_share_token(self) -> str:
        """Legacy self-hosted credential: base64 JSON of the user id and a millisecond timestamp.

        The token carries no signature.
        """
        if not self._user_id or not self._secret:
            raise ConfigurationError("user_id and secret are required for self-hosted authentication")
        payload = {"userId": self._user_id, "timestamp": int(time.time() * 1000)}
        raw = json.dumps(payload, separators=(",", ":")).encode("utf-8")
        return base64.b64encode(raw).decode("ascii")

    def build_url(self, path: str, params: Optional[Params] = None) -> str:
        url = httpx.URL(urljoin(self._endpoint, path))
        for key, value in (params or {}).items():
            if value is None:
                continue
            url = url.copy_set_param(key, _stringify(value))
        return str(url)

    def _compose_headers(self, overrides: Optional[Mapping[str, str]]) -> httpx.Headers:
        headers = httpx.Headers({"Content-Type": "application/json"})
        headers.update(self.get_auth_headers())
        if overrides:
            headers.update(overrides)
        return headers

    def _finish(self, method: str, outcome: str, started: float) -> None:
        REQUEST_COUNTER.labels(method=method, outcome=outcome).inc()
        REQUEST_LATENCY.labels(method=method).observe(time.perf_counter() - started)

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        body: Any = None,
        params: Optional[Params] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResponse[Any]:
        url = self.build_url(path, params)
        content = json.dumps(body, separators=(",", ":")) if body is not None else None
        started = time.perf_counter()
        last_error: Optional[ApiResponse[Any]] = None

        for attempt in range(self._retries + 1):
            outgoing = httpx.Request(method, url, headers=self._compose_headers(headers), content=content)
            logger.debug("%s %s attempt=%s", method, url, attempt + 1)
            try:
                response = await self._fetch(outgoing)
                await response.aread()
            except Exception as exc:  # injected fetch functions may raise anything
                last_error = ApiResponse(ok=False, status=0, error=str(exc) or "Network error")
            else:
                data = _parse_body(response)
                if response.is_success:
                    self._finish(method, "ok", started)
                    return ApiResponse(ok=True, status=response.status_code, data=data)
                last_error = ApiResponse(
                    ok=False,
                    status=response.status_code,
                    error=_error_message(data, response.status_code),
                )

            if attempt >= self._retries or not is_retryable(last_error.status):
                break
            delay = self._retry_delay * 2**attempt
            RETRY_COUNTER.labels(method=method, reason=str(last_error.status or "transport")).inc()
            logger.warning(
                "Retrying %s %s in %sms status=%s error=%s",
                method,
                url,
                delay,
                last_error.status,
                last_error.error,
            )
            await _sleep(delay / 1000)

        result = last_error or ApiResponse(ok=False, status=0, error="Request failed after retries")
        self._finish(method, "error", started)
        logger.warning("Request failed %s %s status=%s error=%s", method, url, result.status, result.error)
        return result

    async def get(self, path: str, params: Optional[Params] = None) -> ApiResponse[Any]:
        return await self.request(path, method="GET", params=params)

    async def post(self, path: str, body: Any = None) -> ApiResponse[Any]:
        return await self.request(path, method="POST", body=body)

    async def put(self, path: str, body: Any = None) -> ApiResponse[Any]:
        return await self.request(path, method="PUT", body=body)

    async def delete(self, path: str) -> ApiResponse[Any]:
        return await self.request(path, method="DELETE")

    async def patch(self, path: str, body: Any = None) -> ApiResponse[Any]:
        return await self.request(path, method="PATCH", body=body)

    async def aclose(self) -> None:
        """Close the owned HTTP client, or an injected fetch that exposes ``aclose``."""
        if self._http is not None:
            await self._http.aclose()
            return
        closer = getattr(self._fetch, "aclose", None)
        if closer is not None:
            await closer()


__all__ = ["ApiClient", "is_retryable"]
