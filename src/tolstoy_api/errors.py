"""Errors raised by the generated endpoint functions."""

from __future__ import annotations

import json


class UnexpectedStatus(Exception):
    """Raised when the server answers with a non-success status code.

    Only raised when ``Client.raise_on_unexpected_status`` is True.
    """

    def __init__(self, status_code: int, content: bytes):
        self.status_code = status_code
        self.content = content
        self.message = _extract_message(content)

        detail = self.message or content.decode(errors="ignore")
        super().__init__(f"Unexpected status code: {status_code}\n\nResponse content:\n{detail}")


def _extract_message(content: bytes) -> str | None:
    """Pull the ``message`` field out of a JSON error body, if there is one."""
    try:
        data = json.loads(content)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    message = data.get("message")
    if isinstance(message, list):
        # Validation errors come back as a list of messages
        return "; ".join(str(m) for m in message)
    return str(message) if message is not None else None


__all__ = ["UnexpectedStatus"]
