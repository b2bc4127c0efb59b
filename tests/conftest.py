"""Shared fixtures: a trimmed copy of the Initializr client metadata."""

import json

import pytest


def build_metadata(boot_values=None, boot_default=None, java_default="21", include_deps=True):
    """Build a metadata mapping shaped like /metadata/client."""
    boot_values = ["3.5.6", "3.4.10", "4.0.0-SNAPSHOT"] if boot_values is None else boot_values
    doc = {
        "type": {
            "default": "maven-project",
            "values": [
                {"id": "maven-project", "name": "Maven Project", "description": "Generate a Maven based project archive."},
                {"id": "gradle-project", "name": "Gradle - Groovy", "description": "Generate a Gradle based project archive."},
            ],
        },
        "language": {
            "default": "java",
            "values": [
                {"id": "java", "name": "Java"},
                {"id": "kotlin", "name": "Kotlin"},
            ],
        },
        "bootVersion": {
            "values": [{"id": v, "name": v} for v in boot_values],
        },
        "javaVersion": {
            "default": java_default,
            "values": [{"id": "25", "name": "25"}, {"id": "21", "name": "21"}, {"id": "17", "name": "17"}],
        },
        "packaging": {
            "default": "jar",
            "values": [{"id": "jar", "name": "Jar"}, {"id": "war", "name": "War"}],
        },
    }
    if boot_default is not None:
        doc["bootVersion"]["default"] = boot_default
    if include_deps:
        doc["dependencies"] = {
            "values": [
                {
                    "name": "Web",
                    "values": [
                        {"id": "web", "name": "Spring Web", "description": "Build web applications."},
                        {"id": "webflux", "name": "Spring Reactive Web"},
                    ],
                },
                {
                    "name": "SQL",
                    "values": [
                        {"id": "data-jpa", "name": "Spring Data JPA", "description": "Persist data with JPA."},
                    ],
                },
            ]
        }
    return doc


@pytest.fixture
def metadata_dict():
    return build_metadata(boot_default="3.5.6")


@pytest.fixture
def metadata_json(metadata_dict):
    return json.dumps(metadata_dict)
