"""Organization API endpoints."""

from ._base import Endpoint
from ..models import Organization

list_organizations = Endpoint("GET", "/organizations", Organization)
get_organization = Endpoint("GET", "/organizations/{org_id}", Organization)

__all__ = [
    "list_organizations",
    "get_organization",
]
