"""Shared HTTP helpers used by the metadata, probe and generation modules.

Encapsulates request/timeout error handling so callers avoid duplicating
try/except blocks. Every call is a single attempt: transport failures are
reported as status code 0 rather than retried.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)

USER_AGENT = f"spring-cli/{Constants.VERSION}"


def _headers(headers: Optional[Dict[str, str]]) -> Dict[str, str]:
    merged = {"User-Agent": USER_AGENT}
    if headers:
        merged.update(headers)
    return merged


def _log_exception(action: str, target: str, outcome: str, context: str) -> None:
    if is_debug_enabled(logger):
        logger.debug(
            "HTTP request exception",
            extra=extra_context(
                event="http_exception",
                component="http_client",
                action=action,
                outcome=outcome,
                target=target,
                context=context
            )
        )


def get_text(
    url: str,
    *,
    context: str,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
) -> Tuple[int, Dict[str, str], str]:
    """Perform a GET request and return (status_code, headers, text).

    Args:
        url: Target URL.
        context: Human-readable source tag for logs (e.g., "metadata").
        params: Optional query parameters.
        headers: Optional request headers.
        timeout: Seconds before giving up; defaults to Constants.REQUEST_TIMEOUT.

    Returns:
        Tuple of (status_code, headers_dict, body). status_code is 0 and the
        body holds the error description when the transport failed.
    """
    safe_target = safe_url(url)
    timeout = timeout if timeout is not None else Constants.REQUEST_TIMEOUT
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    context=context
                )
            )
        try:
            res = requests.get(url, params=params, headers=_headers(headers), timeout=timeout)
        except requests.Timeout:
            _log_exception("GET", safe_target, "timeout", context)
            return 0, {}, f"{context} request timed out after {timeout} seconds"
        except requests.RequestException as exc:  # includes ConnectionError
            _log_exception("GET", safe_target, "request_exception", context)
            return 0, {}, f"{context} connection error: {exc}"

        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response ok",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    outcome="success",
                    status_code=res.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    context=context
                )
            )
        return res.status_code, dict(res.headers), res.text


def get_status(
    url: str,
    *,
    context: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: Optional[float] = None,
) -> int:
    """Perform a GET request and return only its status code (0 on transport failure)."""
    status_code, _, _ = get_text(url, context=context, params=params, timeout=timeout)
    return status_code


def download(
    url: str,
    dest: str,
    *,
    context: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: Optional[float] = None,
) -> int:
    """Stream a GET response body into ``dest`` and return the status code.

    The file is written whatever the status so callers can inspect or remove
    it; status 0 means the transport failed and nothing usable was written.
    """
    safe_target = safe_url(url)
    timeout = timeout if timeout is not None else Constants.REQUEST_TIMEOUT
    with Timer() as t:
        try:
            with requests.get(
                url, params=params, headers=_headers(None), timeout=timeout, stream=True
            ) as res:
                with open(dest, "wb") as fh:
                    for chunk in res.iter_content(chunk_size=Constants.DOWNLOAD_CHUNK_SIZE):
                        if chunk:
                            fh.write(chunk)
                status_code = res.status_code
        except requests.Timeout:
            logger.error("%s request timed out after %s seconds", context, timeout)
            return 0
        except requests.RequestException as exc:
            logger.error("%s connection error: %s", context, exc)
            return 0

    if is_debug_enabled(logger):
        logger.debug(
            "HTTP download finished",
            extra=extra_context(
                event="http_response",
                component="http_client",
                action="GET",
                status_code=status_code,
                duration_ms=t.duration_ms(),
                target=safe_target,
                context=context
            )
        )
    return status_code
