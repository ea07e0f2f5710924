"""Thin HTTP helpers around ``requests``."""

from __future__ import annotations

import contextlib
import logging
import time
from dataclasses import dataclass
from typing import Any

import requests

from multiturn_toolkit.llm._exceptions import APIError, ProviderError, RateLimitError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RetryConfig:
    """Configuration for automatic retries with exponential backoff."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retryable_codes: frozenset[int] = frozenset({429, 500, 502, 503, 504})


NO_RETRY = RetryConfig(max_retries=0)


def _should_retry(status_code: int, attempt: int, config: RetryConfig) -> bool:
    return attempt < config.max_retries and status_code in config.retryable_codes


def _wait_time(attempt: int, config: RetryConfig, retry_after: float | None = None) -> float:
    if retry_after is not None and retry_after > 0:
        return retry_after
    return config.backoff_factor**attempt


def _parse_retry_after(raw_retry: str | None) -> float | None:
    retry_after: float | None = None
    if raw_retry is not None:
        with contextlib.suppress(ValueError, TypeError):
            retry_after = float(raw_retry)
    return retry_after


def _raise_for_status(r: requests.Response) -> None:
    if not r.ok:
        try:
            body: dict[str, Any] | str = r.json()
        except ValueError:
            body = r.text
        if r.status_code == 429:
            raise RateLimitError(
                r.status_code, body, _parse_retry_after(r.headers.get("Retry-After"))
            )
        raise APIError(r.status_code, body)


def _decode_json(r: requests.Response) -> Any:
    try:
        return r.json()
    except ValueError as exc:
        raise ProviderError(f"Response body is not valid JSON: {r.text[:200]!r}") from exc


def post_json(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: int = 60,
    retry: RetryConfig | None = None,
) -> Any:
    """POST JSON and return the parsed response, raising on HTTP errors."""
    config = retry or NO_RETRY
    last_exc: APIError | None = None
    for attempt in range(config.max_retries + 1):
        if attempt > 0 and last_exc is not None:
            retry_after = getattr(last_exc, "retry_after", None)
            time.sleep(_wait_time(attempt, config, retry_after))
        logger.debug("POST %s (attempt %d)", url, attempt + 1)
        try:
            r = requests.post(url, headers=headers, json=payload, timeout=timeout)
            _raise_for_status(r)
            return _decode_json(r)
        except APIError as exc:
            last_exc = exc
            if not _should_retry(exc.status_code, attempt, config):
                raise
            logger.info("Retrying %s after HTTP %d", url, exc.status_code)
        except requests.RequestException as exc:
            raise ProviderError(f"Request to {url} failed: {exc}") from exc
    raise last_exc  # type: ignore[misc]
