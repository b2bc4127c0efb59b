"""Download and extract a generated starter project."""
from __future__ import annotations

import logging
import os
import zipfile
from typing import Optional

import requests

from constants import Constants
from common import http_client
from errors import GenerationError
from versioning.verify import starter_url
from .request import ProjectRequest

logger = logging.getLogger(__name__)

SERVER_ERROR_HINTS = [
    "This usually means the Spring Boot version is incompatible",
    "Try a stable release version (e.g., 3.3.5, 3.4.0)",
    "Avoid SNAPSHOT or BUILD versions",
    "Run 'spring-cli versions' to see available versions",
]


def request_url(project: ProjectRequest, api_url: str = Constants.SPRING_API) -> str:
    """Full starter URL for ``project``, for display."""
    prepared = requests.Request("GET", starter_url(api_url), params=project.to_params()).prepare()
    return prepared.url


def _remove_quietly(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


def extract_archive(archive_path: str, dest_dir: str) -> None:
    """Unzip ``archive_path`` into ``dest_dir``, refusing entries that escape it."""
    root = os.path.realpath(dest_dir)
    try:
        with zipfile.ZipFile(archive_path) as zf:
            for member in zf.namelist():
                target = os.path.realpath(os.path.join(root, member))
                if target != root and not target.startswith(root + os.sep):
                    raise GenerationError(f"Archive entry escapes target directory: {member}")
            zf.extractall(root)
    except zipfile.BadZipFile as exc:
        raise GenerationError(f"Failed to extract project archive: {exc}") from exc


def generate_project(
    project: ProjectRequest,
    api_url: str = Constants.SPRING_API,
    dest_dir: str = ".",
    timeout: Optional[float] = None,
) -> str:
    """Request the starter archive for ``project`` and extract it.

    Returns:
        Path of the extracted project directory.

    Raises:
        GenerationError: Non-200 response, unreadable archive, or the
            archive did not contain the expected base directory.
    """
    archive_path = os.path.join(dest_dir, project.archive_name)
    logger.info("Creating project '%s'...", project.name)
    try:
        status_code = http_client.download(
            starter_url(api_url),
            archive_path,
            context="starter",
            params=project.to_params(),
            timeout=timeout,
        )
    except OSError as exc:
        _remove_quietly(archive_path)
        raise GenerationError(f"Cannot write {archive_path}: {exc}") from exc

    if status_code != 200:
        _remove_quietly(archive_path)
        if status_code == 500:
            raise GenerationError("Server error (HTTP 500)", status_code=500, hints=SERVER_ERROR_HINTS)
        raise GenerationError(f"Failed to create project (HTTP {status_code})", status_code=status_code)

    try:
        extract_archive(archive_path, dest_dir)
    finally:
        _remove_quietly(archive_path)

    project_dir = os.path.join(dest_dir, project.name)
    if not os.path.isdir(project_dir):
        raise GenerationError("Project directory not created")
    return os.path.abspath(project_dir)
