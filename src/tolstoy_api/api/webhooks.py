"""Webhook API endpoints."""

from ._base import Endpoint
from ..models import CreateWebhookRequest, Webhook

create_webhook = Endpoint("POST", "/webhooks", Webhook, CreateWebhookRequest)
list_webhooks = Endpoint("GET", "/webhooks", Webhook, query_params=["event_type"])
get_event_types = Endpoint("GET", "/webhooks/event-types")
get_webhook = Endpoint("GET", "/webhooks/{webhook_id}", Webhook)
update_webhook = Endpoint("PUT", "/webhooks/{webhook_id}", Webhook)
delete_webhook = Endpoint("DELETE", "/webhooks/{webhook_id}")
toggle_webhook = Endpoint("PATCH", "/webhooks/{webhook_id}/toggle", Webhook)
test_webhook = Endpoint("POST", "/webhooks/{webhook_id}/test")

__all__ = [
    "create_webhook",
    "list_webhooks",
    "get_event_types",
    "get_webhook",
    "update_webhook",
    "delete_webhook",
    "toggle_webhook",
    "test_webhook",
]
