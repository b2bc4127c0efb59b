"""Live check of a boot version against the project generation endpoint."""
from __future__ import annotations

import logging
import os
from typing import Dict, Optional

from constants import Constants
from common import http_client

logger = logging.getLogger(__name__)


def starter_url(api_url: str = Constants.SPRING_API) -> str:
    return api_url.rstrip("/") + Constants.STARTER_PATH


def probe_params(boot_version: str) -> Dict[str, str]:
    """Placeholder project parameters with only the boot version varying."""
    params = dict(Constants.PROBE_PARAMS)
    params["bootVersion"] = boot_version
    params["baseDir"] = f"test-{os.getpid()}"
    return params


def probe_status(
    boot_version: str,
    api_url: str = Constants.SPRING_API,
    timeout: Optional[float] = None,
) -> int:
    """Request a placeholder project and return the HTTP status (0 on transport failure)."""
    status_code = http_client.get_status(
        starter_url(api_url),
        context="probe",
        params=probe_params(boot_version),
        timeout=timeout,
    )
    logger.debug("Response code for version '%s': %s", boot_version, status_code)
    return status_code


def probe_boot_version(
    boot_version: str,
    api_url: str = Constants.SPRING_API,
    timeout: Optional[float] = None,
) -> bool:
    """True when the API generates a project for ``boot_version`` (HTTP 200)."""
    return probe_status(boot_version, api_url=api_url, timeout=timeout) == 200
