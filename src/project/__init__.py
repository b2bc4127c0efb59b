"""Starter project requests, generation and backups."""

from .backup import backup_path
from .generator import generate_project, request_url
from .request import ProjectRequest, join_dependencies, validate_dependencies

__all__ = [
    "backup_path",
    "generate_project",
    "request_url",
    "ProjectRequest",
    "join_dependencies",
    "validate_dependencies",
]
