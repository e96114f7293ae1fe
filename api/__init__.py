"""Framework-level HTTP endpoints."""
from api.status_api import RECENT_EVENT_COUNT, init_status_api

__all__ = ["init_status_api", "RECENT_EVENT_COUNT"]
