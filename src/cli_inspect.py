"""Read-only commands: dependency and version listings, debug report, version probe."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import datetime
from typing import Optional

from cli_config import Settings
from cli_create import make_resolver
from common import http_client
from constants import Constants, ExitCodes, MetadataCategories
from errors import FetchError
from initializr.fetcher import fetch_metadata, metadata_url, save_debug_payload
from initializr.models import MetadataDocument, load_metadata
from project.request import ProjectRequest
from versioning.verify import probe_status, starter_url

logger = logging.getLogger(__name__)


def _fetch(settings: Settings) -> Optional[str]:
    try:
        return fetch_metadata(settings.api_url, timeout=settings.request_timeout)
    except FetchError as exc:
        logger.error("%s", exc)
        return None


def list_dependencies(settings: Settings) -> ExitCodes:
    """Print every dependency grouped by category."""
    logger.info("Fetching available dependencies...")
    raw = _fetch(settings)
    if raw is None:
        return ExitCodes.CONNECTION_ERROR

    document = load_metadata(raw)
    if document is None or not document.dependency_groups:
        logger.error("Failed to parse dependencies")
        try:
            logger.warning("Raw metadata saved to %s", save_debug_payload(raw))
        except OSError as exc:
            logger.error("Could not save raw metadata: %s", exc)
        return ExitCodes.CONNECTION_ERROR

    for group in document.dependency_groups:
        print(f"\n{group.name}")
        for dep in group.values:
            line = f"  {dep.id} - {dep.name}"
            if dep.description:
                line += f" ({dep.description})"
            print(line)
    return ExitCodes.SUCCESS


def _print_category(title: str, document: MetadataDocument, name: str, limit: Optional[int] = None) -> None:
    print(f"{title}:")
    category = document.category(name)
    values = category.values if category else ()
    for option in values[:limit] if limit else values:
        print(f"  • {option.id} → {option.name}")
    print("")


def show_versions(settings: Settings) -> ExitCodes:
    """Print available Spring Boot and Java versions."""
    logger.info("Fetching version information...")
    raw = _fetch(settings)
    if raw is None:
        return ExitCodes.CONNECTION_ERROR
    document = load_metadata(raw)
    if document is None:
        logger.error("Invalid metadata JSON")
        return ExitCodes.CONNECTION_ERROR
    _print_category("Spring Boot Versions", document, MetadataCategories.BOOT_VERSION.value)
    _print_category("Java Versions", document, MetadataCategories.JAVA_VERSION.value)
    return ExitCodes.SUCCESS


def check_version(settings: Settings, boot_version: str) -> ExitCodes:
    """Ask the generation endpoint whether it accepts ``boot_version``."""
    status_code = probe_status(boot_version, api_url=settings.api_url, timeout=settings.request_timeout)
    print(f"Response code for version '{boot_version}': {status_code}")
    if status_code == 0:
        return ExitCodes.CONNECTION_ERROR
    return ExitCodes.SUCCESS if status_code == 200 else ExitCodes.INVALID_INPUT


def _option_name(document: MetadataDocument, category: str, option_id: Optional[str]) -> str:
    cat = document.category(category)
    option = cat.find(option_id) if cat and option_id else None
    return option.name if option else "N/A"


def _generation_status(settings: Settings, project: ProjectRequest) -> int:
    return http_client.get_status(
        starter_url(settings.api_url),
        context="debug",
        params=project.to_params(),
        timeout=settings.request_timeout,
    )


def debug_metadata(settings: Settings, dump_dir: Optional[str] = None) -> ExitCodes:
    """Print a diagnostic report of the metadata and version resolution."""
    # pylint: disable=too-many-locals, too-many-statements
    print("Debug Mode - Fetching Spring Initializr Metadata\n")

    print("Testing connection to Spring Initializr...")
    status_code = http_client.get_status(settings.api_url, context="debug", timeout=settings.request_timeout)
    print(f"HTTP Status Code: {status_code}\n")
    if status_code != 200:
        logger.error("Cannot connect to Spring Initializr")
        return ExitCodes.CONNECTION_ERROR

    print(f"Fetching metadata from: {metadata_url(settings.api_url)}\n")
    raw = _fetch(settings)
    if raw is None:
        logger.error("No metadata received")
        return ExitCodes.CONNECTION_ERROR
    print(f"Metadata received ({len(raw.encode('utf-8'))} bytes)\n")

    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError:
        logger.error("Invalid JSON")
        print("\n".join(raw.splitlines()[:20]))
        return ExitCodes.CONNECTION_ERROR
    print("Valid JSON\n")

    document = load_metadata(decoded)
    if document is None:
        logger.warning("Metadata does not match the expected structure; resolution will use fallbacks")
        document = MetadataDocument(fields=tuple(decoded) if isinstance(decoded, dict) else ())

    print("Available Fields:")
    for name in document.fields:
        print(f"  • {name}")
    print("")

    resolver = make_resolver(settings)
    boot_key = MetadataCategories.BOOT_VERSION.value
    print("Default Values (ID → Name → Normalized):")
    for label, category in (
        ("Type", MetadataCategories.TYPE.value),
        ("Boot Version", boot_key),
        ("Java Version", MetadataCategories.JAVA_VERSION.value),
        ("Language", MetadataCategories.LANGUAGE.value),
        ("Packaging", MetadataCategories.PACKAGING.value),
    ):
        default = document.default_of(category)
        line = f"  {label}: {default or 'none'} → {_option_name(document, category, default)}"
        if category == boot_key:
            line += f" → [Normalized: {resolver.resolve(decoded, default or '')}]"
        print(line)
    print("")

    _print_category("Project Types", document, MetadataCategories.TYPE.value)
    _print_category(
        f"Available Spring Boot Versions (first {Constants.DEBUG_BOOT_VERSION_LIMIT})",
        document,
        boot_key,
        limit=Constants.DEBUG_BOOT_VERSION_LIMIT,
    )
    _print_category("Available Java Versions", document, MetadataCategories.JAVA_VERSION.value)

    print("Testing Project Generation:")
    boot_raw = document.default_of(boot_key) or ""
    boot = resolver.resolve(decoded, boot_raw)
    project = ProjectRequest(
        name="test",
        type=document.default_of(MetadataCategories.TYPE.value) or Constants.DEFAULT_PROJECT_TYPE,
        boot_version=boot,
        java_version=document.default_of(MetadataCategories.JAVA_VERSION.value) or settings.default_java,
        dependencies="web",
    )
    print(f"  Using Type: {project.type}")
    print(f"  Boot Version: {boot_raw} → Normalized: {boot}")
    print(f"  Java Version: {project.java_version}")

    gen_status = _generation_status(settings, project)
    if gen_status == 200:
        print("  Project generation test successful (HTTP 200)")
        print(f"  Normalized version '{boot}' works correctly")
    else:
        logger.error("Project generation test failed with normalized version (HTTP %s)", gen_status)
        if boot_raw and boot_raw != boot:
            print(f"  Trying with original (raw) version: {boot_raw}")
            project.boot_version = boot_raw
            raw_status = _generation_status(settings, project)
            if raw_status == 200:
                logger.warning("Original version works (HTTP 200) - API requires the suffixed version")
            else:
                logger.error("Both versions failed (HTTP %s)", raw_status)
    print("")

    print("Testing boot version resolution:")
    for sample in Constants.RESOLVER_SAMPLE_INPUTS:
        result = resolver.resolve_detailed(decoded, sample)
        shown = f"'{sample}'" if sample else "(empty)"
        print(f"  Input: {shown} → Resolved: '{result.version}' [{result.step.value}]")
    print("")

    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    output_file = os.path.join(dump_dir or tempfile.gettempdir(), f"spring-initializr-metadata-{stamp}.json")
    try:
        with open(output_file, "w", encoding="utf-8") as fh:
            json.dump(decoded, fh, indent=2)
        print(f"Full metadata saved to: {output_file}")
    except OSError as exc:
        logger.error("Could not save metadata: %s", exc)
    return ExitCodes.SUCCESS
