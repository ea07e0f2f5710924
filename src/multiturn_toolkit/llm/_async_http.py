"""Async HTTP helpers using ``httpx``."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from multiturn_toolkit.llm._exceptions import APIError, ProviderError, RateLimitError
from multiturn_toolkit.llm._http import (
    NO_RETRY,
    RetryConfig,
    _parse_retry_after,
    _should_retry,
    _wait_time,
)

logger = logging.getLogger(__name__)


def _raise_for_status_httpx(r: httpx.Response) -> None:
    if r.is_success:
        return
    try:
        body: dict[str, Any] | str = r.json()
    except ValueError:
        body = r.text
    if r.status_code == 429:
        raise RateLimitError(r.status_code, body, _parse_retry_after(r.headers.get("Retry-After")))
    raise APIError(r.status_code, body)


def _decode_json_httpx(r: httpx.Response) -> Any:
    try:
        return r.json()
    except ValueError as exc:
        raise ProviderError(f"Response body is not valid JSON: {r.text[:200]!r}") from exc


async def async_post_json(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: int = 60,
    retry: RetryConfig | None = None,
) -> Any:
    """POST JSON asynchronously and return the parsed response."""
    config = retry or NO_RETRY
    last_exc: APIError | None = None
    for attempt in range(config.max_retries + 1):
        if attempt > 0 and last_exc is not None:
            retry_after = getattr(last_exc, "retry_after", None)
            await asyncio.sleep(_wait_time(attempt, config, retry_after))
        logger.debug("POST %s (attempt %d)", url, attempt + 1)
        try:
            async with httpx.AsyncClient() as client:
                r = await client.post(url, headers=headers, json=payload, timeout=timeout)
                _raise_for_status_httpx(r)
                return _decode_json_httpx(r)
        except APIError as exc:
            last_exc = exc
            if not _should_retry(exc.status_code, attempt, config):
                raise
            logger.info("Retrying %s after HTTP %d", url, exc.status_code)
        except httpx.HTTPError as exc:
            raise ProviderError(f"Request to {url} failed: {exc}") from exc
    raise last_exc  # type: ignore[misc]
