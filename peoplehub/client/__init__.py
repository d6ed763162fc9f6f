"""Dashboard client — API wrapper, persisted preferences and the dashboard shell."""

from peoplehub.client.api import ApiClient, ApiError, NetworkError, NotFoundError
from peoplehub.client.dashboard import Dashboard, TabView
from peoplehub.client.state import DashboardState
from peoplehub.client.store import ClientStore

__all__ = [
    "ApiClient",
    "ApiError",
    "ClientStore",
    "Dashboard",
    "DashboardState",
    "NetworkError",
    "NotFoundError",
    "TabView",
]
