"""Endpoint groups of the Entrolytics REST API."""

from .admin import AdminAPI
from .auth import AuthAPI
from .billing import BillingAPI
from .boards import BoardsAPI
from .events import EventsAPI
from .links import LinksAPI, PixelsAPI
from .me import MeAPI
from .orgs import OrgsAPI
from .reports import ReportsAPI
from .segments import SegmentsAPI
from .sessions import SessionsAPI
from .system import ConfigAPI, IntegrationsAPI, WebhooksAPI
from .users import UsersAPI
from .websites import WebsitesAPI

__all__ = [
    "AdminAPI",
    "AuthAPI",
    "BillingAPI",
    "BoardsAPI",
    "ConfigAPI",
    "EventsAPI",
    "IntegrationsAPI",
    "LinksAPI",
    "MeAPI",
    "OrgsAPI",
    "PixelsAPI",
    "ReportsAPI",
    "SegmentsAPI",
    "SessionsAPI",
    "UsersAPI",
    "WebhooksAPI",
    "WebsitesAPI",
]
