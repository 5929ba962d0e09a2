"""Entrolytics Python SDK."""

from __future__ import annotations

from typing import Optional

from .client import ApiClient
from .config import ClientConfig, ConfigurationError, EnvLookup
from .edge import create_edge_fetch, get_client_ip, get_env, get_geo_from_request, get_region_info, require_env
from .endpoints import (
    AdminAPI,
    AuthAPI,
    BillingAPI,
    BoardsAPI,
    ConfigAPI,
    EventsAPI,
    IntegrationsAPI,
    LinksAPI,
    MeAPI,
    OrgsAPI,
    PixelsAPI,
    ReportsAPI,
    SegmentsAPI,
    SessionsAPI,
    UsersAPI,
    WebhooksAPI,
    WebsitesAPI,
)
from .models import ApiResponse
from .runtime import Runtime, assert_runtime, detect_runtime, get_runtime_capabilities


class EntrolyticsClient:
    """One request engine shared by every endpoint group."""

    def __init__(self, api: ApiClient) -> None:
        self.api = api
        self.auth = AuthAPI(api)
        self.me = MeAPI(api)
        self.users = UsersAPI(api)
        self.orgs = OrgsAPI(api)
        self.websites = WebsitesAPI(api)
        self.sessions = SessionsAPI(api)
        self.segments = SegmentsAPI(api)
        self.events = EventsAPI(api)
        self.reports = ReportsAPI(api)
        self.boards = BoardsAPI(api)
        self.links = LinksAPI(api)
        self.pixels = PixelsAPI(api)
        self.billing = BillingAPI(api)
        self.admin = AdminAPI(api)
        self.config = ConfigAPI(api)
        self.webhooks = WebhooksAPI(api)
        self.integrations = IntegrationsAPI(api)

    async def __aenter__(self) -> "EntrolyticsClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def set_bearer_token(self, token: Optional[str]) -> None:
        self.api.set_bearer_token(token)

    async def aclose(self) -> None:
        await self.api.aclose()


def get_client(config: Optional[ClientConfig] = None, *, env: Optional[EnvLookup] = None) -> EntrolyticsClient:
    return EntrolyticsClient(ApiClient(config, env=env))


__all__ = [
    "ApiClient",
    "ApiResponse",
    "ClientConfig",
    "ConfigurationError",
    "EntrolyticsClient",
    "Runtime",
    "assert_runtime",
    "create_edge_fetch",
    "detect_runtime",
    "get_client",
    "get_client_ip",
    "get_env",
    "get_geo_from_request",
    "get_region_info",
    "get_runtime_capabilities",
    "require_env",
]
