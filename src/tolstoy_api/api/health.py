"""Health API endpoints."""

from ._base import Endpoint
from ..models import HealthStatus

get_status = Endpoint("GET", "/status", HealthStatus)

__all__ = ["get_status"]
