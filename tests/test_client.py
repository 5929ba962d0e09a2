from __future__ import annotations

import base64
import json
import os
import time
from typing import Any, Dict, List, Optional

import httpx
import pytest
from prometheus_client import REGISTRY

from entro_api.client import ApiClient, is_retryable
from entro_api.config import API_KEY_HEADER, SHARE_TOKEN_HEADER, ClientConfig, ConfigurationError, environ_lookup
from entro_api.edge import create_edge_fetch

ENDPOINT = "https://api.example.com"


def no_env(key: str) -> Optional[str]:
    return None


def test_missing_endpoint_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        ApiClient(ClientConfig(api_key="key"), env=no_env)


def test_empty_endpoint_falls_back_to_environment() -> None:
    env = {"ENTROLYTICS_API_ENDPOINT": "https://env.example.com", "ENTROLYTICS_API_KEY": "env-key"}
    client = ApiClient(ClientConfig(endpoint=""), env=env.get)
    assert client.endpoint == "https://env.example.com"
    assert client.get_auth_headers() == {API_KEY_HEADER: "env-key"}


def test_explicit_config_wins_over_environment() -> None:
    env = {"ENTROLYTICS_API_ENDPOINT": "https://env.example.com", "ENTROLYTICS_BEARER_TOKEN": "env-token"}
    client = ApiClient(ClientConfig(endpoint=ENDPOINT, bearer_token="explicit"), env=env.get)
    assert client.endpoint == ENDPOINT
    assert client.get_auth_headers() == {"Authorization": "Bearer explicit"}


def test_defaults_and_explicit_zero_retries() -> None:
    client = ApiClient(ClientConfig(endpoint=ENDPOINT), env=no_env)
    assert client.retries == 3
    assert client.retry_delay == 1000
    client = ApiClient(ClientConfig(endpoint=ENDPOINT, retries=0, retry_delay=0), env=no_env)
    assert client.retries == 0
    assert client.retry_delay == 0


def test_auth_priority_bearer_then_api_key_then_share_token() -> None:
    config = dict(endpoint=ENDPOINT, bearer_token="jwt", api_key="key", user_id="u1", secret="s")
    assert ApiClient(ClientConfig(**config), env=no_env).get_auth_headers() == {"Authorization": "Bearer jwt"}

    config["bearer_token"] = None
    assert ApiClient(ClientConfig(**config), env=no_env).get_auth_headers() == {API_KEY_HEADER: "key"}

    config["api_key"] = None
    headers = ApiClient(ClientConfig(**config), env=no_env).get_auth_headers()
    assert list(headers) == [SHARE_TOKEN_HEADER]


def test_no_credentials_sends_no_auth_header() -> None:
    assert ApiClient(ClientConfig(endpoint=ENDPOINT), env=no_env).get_auth_headers() == {}
    partial = ApiClient(ClientConfig(endpoint=ENDPOINT, user_id="u1"), env=no_env)
    assert partial.get_auth_headers() == {}


def test_share_token_encodes_user_and_timestamp() -> None:
    client = ApiClient(ClientConfig(endpoint=ENDPOINT, user_id="u1", secret="s"), env=no_env)
    before = int(time.time() * 1000)
    payload = json.loads(base64.b64decode(client.create_share_token()))
    after = int(time.time() * 1000)
    assert payload["userId"] == "u1"
    assert before <= payload["timestamp"] <= after


def test_share_token_requires_both_legacy_fields() -> None:
    client = ApiClient(ClientConfig(endpoint=ENDPOINT, user_id="u1"), env=no_env)
    with pytest.raises(ConfigurationError):
        client.create_share_token()


def test_build_url_omits_none_and_stringifies_values() -> None:
    client = ApiClient(ClientConfig(endpoint=ENDPOINT), env=no_env)
    url = client.build_url("/websites", {"startAt": 1, "unit": None, "compare": True, "q": "home"})
    assert url == "https://api.example.com/websites?startAt=1&compare=true&q=home"


def test_build_url_resolves_against_endpoint() -> None:
    client = ApiClient(ClientConfig(endpoint="https://api.example.com/api/"), env=no_env)
    assert client.build_url("websites") == "https://api.example.com/api/websites"
    assert client.build_url("/me") == "https://api.example.com/me"
    assert client.build_url("/stats?unit=day", {"unit": "hour"}) == "https://api.example.com/stats?unit=hour"


def test_retryable_statuses() -> None:
    assert all(is_retryable(status) for status in (0, 429, 500, 503, 599))
    assert not any(is_retryable(status) for status in (200, 301, 400, 401, 404, 422))


@pytest.mark.asyncio
async def test_success_returns_data_without_retry(make_client, sleeps: List[float]) -> None:
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(200, json={"x": 1})

    response = await make_client(handler).get("/websites")

    assert response.ok is True
    assert response.status == 200
    assert response.data == {"x": 1}
    assert response.error is None
    assert calls["count"] == 1
    assert sleeps == []


@pytest.mark.asyncio
async def test_server_errors_retry_with_exponential_backoff(make_client, sleeps: List[float]) -> None:
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(503, text="Service Unavailable")

    response = await make_client(handler, retries=2).get("/websites")

    assert calls["count"] == 3
    assert sleeps == [1.0, 2.0]
    assert response.ok is False
    assert response.status == 503
    assert response.error == "HTTP 503"
    assert response.data is None


@pytest.mark.asyncio
async def test_client_errors_are_terminal(make_client, sleeps: List[float]) -> None:
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(404, json={"message": "not found"})

    response = await make_client(handler).get("/websites/missing")

    assert calls["count"] == 1
    assert sleeps == []
    assert (response.ok, response.status, response.error) == (False, 404, "not found")


@pytest.mark.asyncio
async def test_error_field_takes_precedence_over_message(make_client, sleeps: List[float]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": "bad input", "message": "ignored"})

    response = await make_client(handler).post("/websites", {"name": "site"})
    assert response.error == "bad input"


@pytest.mark.asyncio
async def test_non_string_error_fields_fall_back_to_status(make_client, sleeps: List[float]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"error": {"code": 1}, "message": ["a"]})

    response = await make_client(handler).post("/websites", {})
    assert response.error == "HTTP 422"


@pytest.mark.asyncio
async def test_rate_limit_is_retried_until_success(make_client, sleeps: List[float]) -> None:
    statuses = [429, 429, 200]

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(statuses.pop(0), json={"done": True})

    response = await make_client(handler, retry_delay=250).get("/me")

    assert response.ok is True
    assert response.data == {"done": True}
    assert sleeps == [0.25, 0.5]


@pytest.mark.asyncio
async def test_transport_errors_retry_then_report_status_zero(sleeps: List[float]) -> None:
    calls = {"count": 0}

    async def fetch(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        raise httpx.ConnectError("connection refused", request=request)

    client = ApiClient(ClientConfig(endpoint=ENDPOINT, fetch=fetch, retries=1), env=no_env)
    response = await client.get("/websites")

    assert calls["count"] == 2
    assert sleeps == [1.0]
    assert (response.ok, response.status, response.error) == (False, 0, "connection refused")


@pytest.mark.asyncio
async def test_transport_error_without_message_uses_generic_text(sleeps: List[float]) -> None:
    async def fetch(request: httpx.Request) -> httpx.Response:
        raise ConnectionResetError()

    client = ApiClient(ClientConfig(endpoint=ENDPOINT, fetch=fetch, retries=0), env=no_env)
    response = await client.get("/websites")

    assert (response.status, response.error) == (0, "Network error")
    assert sleeps == []


@pytest.mark.asyncio
async def test_any_fetch_exception_becomes_status_zero(sleeps: List[float]) -> None:
    async def fetch(request: httpx.Request) -> httpx.Response:
        raise RuntimeError("socket closed")

    client = ApiClient(ClientConfig(endpoint=ENDPOINT, fetch=fetch, retries=0), env=no_env)
    response = await client.get("/websites")

    assert (response.ok, response.status, response.error) == (False, 0, "socket closed")


@pytest.mark.asyncio
async def test_redirects_are_followed(make_client, sleeps: List[float]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"location": f"{ENDPOINT}/new"})
        return httpx.Response(200, json={"x": 1})

    response = await make_client(handler).get("/old")
    assert (response.ok, response.status, response.data) == (True, 200, {"x": 1})


@pytest.mark.asyncio
async def test_unparseable_success_body_yields_empty_data(make_client, sleeps: List[float]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    response = await make_client(handler).delete("/websites/1")
    assert (response.ok, response.status, response.data) == (True, 204, {})

    def html_handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>ok</html>")

    response = await make_client(html_handler).get("/")
    assert response.data == {}


@pytest.mark.asyncio
async def test_negative_retries_return_fallback_failure(make_client, sleeps: List[float]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - never called
        raise AssertionError("no attempt expected")

    response = await make_client(handler, retries=-1).get("/")
    assert (response.ok, response.status, response.error) == (False, 0, "Request failed after retries")


@pytest.mark.asyncio
async def test_headers_and_body_composition(make_client, sleeps: List[float]) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    client = make_client(handler, api_key="key")
    await client.get("/websites", {"limit": 10})
    await client.request(
        "/upload",
        method="PUT",
        body={"a": [1, 2]},
        headers={"content-type": "text/plain", API_KEY_HEADER: "override"},
    )

    get_request, put_request = seen
    assert get_request.method == "GET"
    assert get_request.content == b""
    assert get_request.headers["Content-Type"] == "application/json"
    assert get_request.headers[API_KEY_HEADER] == "key"
    assert get_request.url.params["limit"] == "10"

    assert put_request.method == "PUT"
    assert json.loads(put_request.content) == {"a": [1, 2]}
    assert put_request.headers.get_list("content-type") == ["text/plain"]
    assert put_request.headers[API_KEY_HEADER] == "override"


@pytest.mark.asyncio
async def test_verb_helpers_use_matching_methods(make_client, sleeps: List[float]) -> None:
    seen: List[tuple[str, bytes]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.content))
        return httpx.Response(200, json={})

    client = make_client(handler)
    await client.post("/a", {"v": 1})
    await client.put("/a")
    await client.patch("/a", {"v": 2})
    await client.delete("/a")

    assert seen == [
        ("POST", b'{"v":1}'),
        ("PUT", b""),
        ("PATCH", b'{"v":2}'),
        ("DELETE", b""),
    ]


@pytest.mark.asyncio
async def test_repeated_get_is_not_cached(make_client, sleeps: List[float]) -> None:
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(200, json={"x": 1})

    client = make_client(handler)
    first = await client.get("/websites")
    second = await client.get("/websites")

    assert calls["count"] == 2
    assert first.model_dump() == second.model_dump()


@pytest.mark.asyncio
async def test_token_refresh_applies_to_next_attempt_of_inflight_call(make_client, sleeps: List[float]) -> None:
    tokens: List[str] = []
    client: ApiClient

    def handler(request: httpx.Request) -> httpx.Response:
        tokens.append(request.headers["Authorization"])
        if len(tokens) == 1:
            client.set_bearer_token("fresh")
            return httpx.Response(503, json={"error": "unavailable"})
        return httpx.Response(200, json={"ok": True})

    client = make_client(handler, bearer_token="stale")
    response = await client.get("/me")

    assert response.ok is True
    assert tokens == ["Bearer stale", "Bearer fresh"]
    assert client.bearer_token == "fresh"


@pytest.mark.asyncio
async def test_clearing_bearer_token_falls_back_to_api_key(make_client, sleeps: List[float]) -> None:
    seen: List[Dict[str, Any]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(dict(request.headers))
        return httpx.Response(200, json={})

    client = make_client(handler, bearer_token="jwt", api_key="key")
    client.set_bearer_token(None)
    await client.get("/me")

    assert "authorization" not in seen[0]
    assert seen[0][API_KEY_HEADER] == "key"


@pytest.mark.asyncio
async def test_request_metrics_are_recorded(make_client, sleeps: List[float]) -> None:
    def sample(outcome: str) -> float:
        value = REGISTRY.get_sample_value("entro_api_requests_total", {"method": "PATCH", "outcome": outcome})
        return value or 0.0

    def retries() -> float:
        value = REGISTRY.get_sample_value("entro_api_retries_total", {"method": "PATCH", "reason": "500"})
        return value or 0.0

    statuses = [500, 200, 400]

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(statuses.pop(0), json={})

    ok_before, error_before, retries_before = sample("ok"), sample("error"), retries()
    client = make_client(handler)
    await client.patch("/a", {})
    await client.patch("/a", {})

    assert sample("ok") == ok_before + 1
    assert sample("error") == error_before + 1
    assert retries() == retries_before + 1


@pytest.mark.asyncio
async def test_async_context_manager_closes_owned_client(make_client, sleeps: List[float]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={})

    async with make_client(handler) as client:
        assert (await client.get("/")).ok
    assert client._http is not None and client._http.is_closed


@pytest.mark.asyncio
async def test_aclose_closes_injected_edge_fetch(sleeps: List[float]) -> None:
    fetch = create_edge_fetch(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})))
    client = ApiClient(ClientConfig(endpoint=ENDPOINT, fetch=fetch), env=no_env)
    assert (await client.get("/")).ok

    await client.aclose()
    assert fetch._client.is_closed


@pytest.mark.asyncio
async def test_aclose_ignores_plain_fetch_functions(sleeps: List[float]) -> None:
    async def fetch(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={}, request=request)

    async with ApiClient(ClientConfig(endpoint=ENDPOINT, fetch=fetch), env=no_env) as client:
        assert (await client.get("/")).ok


def test_missing_process_environment_is_tolerated(monkeypatch) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200))
    with monkeypatch.context() as patched:
        patched.delattr(os, "environ")

        assert environ_lookup("ENTROLYTICS_API_ENDPOINT") is None
        client = ApiClient(ClientConfig(endpoint=ENDPOINT, transport=transport))
        assert client.endpoint == ENDPOINT
        assert client.get_auth_headers() == {}
