"""Metadata endpoint client."""
from __future__ import annotations

import logging
import os
import tempfile
from typing import Optional

from constants import Constants
from common import http_client
from common.logging_utils import extra_context, is_debug_enabled, safe_url
from errors import FetchError

logger = logging.getLogger(__name__)

DEBUG_DUMP_NAME = "spring-metadata-debug.json"


def metadata_url(api_url: str = Constants.SPRING_API) -> str:
    return api_url.rstrip("/") + Constants.METADATA_PATH


def fetch_metadata(api_url: str = Constants.SPRING_API, timeout: Optional[float] = None) -> str:
    """Fetch the raw metadata document from the Initializr service.

    The body is returned untouched; JSON validation is left to the consumer.

    Args:
        api_url: Service base URL.
        timeout: Request timeout in seconds.

    Returns:
        The non-empty response body.

    Raises:
        FetchError: The transport failed or the body was empty.
    """
    url = metadata_url(api_url)
    logger.info("Fetching latest Spring Initializr options...")
    status_code, _, text = http_client.get_text(
        url,
        context="metadata",
        headers={"Accept": Constants.METADATA_ACCEPT},
        timeout=timeout,
    )
    if status_code == 0:
        raise FetchError(f"Failed to fetch metadata: {text}")
    if not text or not text.strip():
        raise FetchError("Failed to fetch metadata: empty response body", status_code=status_code)

    if is_debug_enabled(logger):
        logger.debug(
            "Metadata received",
            extra=extra_context(
                event="fetch",
                component="metadata",
                action="fetch_metadata",
                outcome="success",
                status_code=status_code,
                size=len(text),
                target=safe_url(url)
            )
        )
    return text


def save_debug_payload(payload: str, directory: Optional[str] = None) -> str:
    """Write a raw payload to the temp directory for later inspection."""
    path = os.path.join(directory or tempfile.gettempdir(), DEBUG_DUMP_NAME)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(payload)
    return path
