"""Exceptions raised while talking to an Azure OpenAI deployment."""

from __future__ import annotations

import json
from typing import Any


class ToolkitError(Exception):
    """Base class for every error this package raises on purpose."""


class ConfigError(ToolkitError, ValueError):
    """Raised when a required configuration value is missing or empty."""


class AuthError(ToolkitError):
    """Raised when the credential provider cannot produce a bearer token."""

    def __init__(
        self, message: str, *, hint: str = "Make sure you've logged in with `az login`."
    ) -> None:
        super().__init__(message)
        self.hint = hint


class ProviderError(ToolkitError):
    """Raised when a completion call fails (network, throttling, unreadable body)."""


class APIError(ProviderError):
    """Raised when the endpoint answers with an HTTP error status."""

    def __init__(self, status_code: int, body: dict[str, Any] | str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class RateLimitError(APIError):
    """Raised on HTTP 429 — includes optional ``retry_after`` from the server."""

    def __init__(
        self,
        status_code: int,
        body: dict[str, Any] | str,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(status_code, body)
        self.retry_after = retry_after


class ResponseShapeError(ToolkitError):
    """Raised when a successful call carries no answer under any known layout.

    The full payload is kept on ``raw`` so callers can show it for diagnosis.
    """

    def __init__(self, message: str, raw: Any) -> None:
        super().__init__(message)
        self.raw = raw

    def raw_json(self) -> str:
        """Render the raw payload as indented JSON (falls back to ``repr``)."""
        try:
            return json.dumps(self.raw, indent=2, default=str)
        except (TypeError, ValueError):
            return repr(self.raw)
