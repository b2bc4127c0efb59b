"""Project generation request."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List

from constants import Constants
from errors import InvalidDependencies

_DEPENDENCY_LIST = re.compile(r"[a-zA-Z0-9,._-]*")


def validate_dependencies(deps: str) -> str:
    """Return ``deps`` unchanged if it only holds id characters and commas.

    Raises:
        InvalidDependencies: The list contains anything else, which could
            otherwise inject extra query parameters.
    """
    deps = deps or ""
    if not _DEPENDENCY_LIST.fullmatch(deps):
        raise InvalidDependencies(f"Invalid dependency format: {deps!r}")
    return deps


def join_dependencies(ids: List[str]) -> str:
    return ",".join(i for i in ids if i)


@dataclass
class ProjectRequest:
    """Everything needed to request a starter archive."""

    name: str
    group_id: str = Constants.DEFAULT_GROUP_ID
    artifact_id: str = ""
    package_name: str = ""
    type: str = Constants.DEFAULT_PROJECT_TYPE
    language: str = Constants.DEFAULT_LANGUAGE
    boot_version: str = Constants.FALLBACK_BOOT_VERSION
    java_version: str = Constants.DEFAULT_JAVA
    packaging: str = Constants.DEFAULT_PACKAGING
    dependencies: str = ""

    def __post_init__(self) -> None:
        if not self.artifact_id:
            self.artifact_id = self.name
        if not self.package_name:
            self.package_name = f"{self.group_id}.{self.artifact_id}"
        self.dependencies = validate_dependencies(self.dependencies)

    @property
    def archive_name(self) -> str:
        return f"{self.name}.zip"

    @property
    def is_maven(self) -> bool:
        return self.type.startswith("maven")

    @property
    def run_hint(self) -> str:
        return "./mvnw spring-boot:run" if self.is_maven else "./gradlew bootRun"

    def to_params(self) -> Dict[str, str]:
        """Query parameters for the starter endpoint."""
        params = {
            "type": self.type,
            "language": self.language,
            "bootVersion": self.boot_version,
            "baseDir": self.name,
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "name": self.name,
            "packageName": self.package_name,
            "packaging": self.packaging,
            "javaVersion": self.java_version,
        }
        if self.dependencies:
            params["dependencies"] = self.dependencies
        return params

    def dependency_list(self) -> List[str]:
        return [d for d in self.dependencies.split(",") if d]
