"""Project creation flows: interactive mode and quick create."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from typing import Optional, Tuple

from cli_config import Settings
from constants import Constants, ExitCodes, MetadataCategories
from errors import BackupError, FetchError, GenerationError, InvalidDependencies
from initializr.fetcher import fetch_metadata, save_debug_payload
from initializr.models import MetadataDocument, load_metadata
from project.backup import backup_path
from project.generator import generate_project, request_url
from project.request import ProjectRequest, join_dependencies, validate_dependencies
from prompts import InputFn, confirm, get_input, pick_many, pick_one
from versioning.resolver import BootVersionResolver

logger = logging.getLogger(__name__)

BANNER = f"""
╔══════════════════════════════════════════════╗
║     Spring Initializr CLI Tool v{Constants.VERSION:<13}║
║      Create Spring Boot projects with FZF    ║
╚══════════════════════════════════════════════╝
"""


def make_resolver(settings: Settings) -> BootVersionResolver:
    return BootVersionResolver(
        verify=settings.verify_version,
        api_url=settings.api_url,
        timeout=settings.request_timeout,
    )


def show_summary(project: ProjectRequest) -> None:
    """Print the project configuration before it is generated."""
    deps_display = ", ".join(project.dependency_list()) or "(none)"
    print("╔══════════════════════════════════════════════╗")
    print("║              PROJECT SUMMARY                 ║")
    print("╚══════════════════════════════════════════════╝\n")
    print("Project Information:")
    print(f"   Name:           {project.name}")
    print(f"   Group:          {project.group_id}")
    print(f"   Artifact:       {project.artifact_id}")
    print(f"   Package:        {project.package_name}\n")
    print("Configuration:")
    print(f"   Type:           {project.type}")
    print(f"   Language:       {project.language}")
    print(f"   Boot Version:   {project.boot_version}")
    print(f"   Java Version:   {project.java_version}")
    print(f"   Packaging:      {project.packaging}\n")
    print("Dependencies:")
    print(f"   {deps_display}")


def prepare_target(name: str, settings: Settings, input_fn: InputFn = input) -> bool:
    """Make room for ``name``; False when the user declines to overwrite.

    An existing path is backed up before it is removed.
    """
    if not os.path.exists(name):
        return True
    logger.warning("Directory '%s' already exists", name)
    if not confirm("Overwrite?", default=False, input_fn=input_fn):
        return False
    backup_path(name, settings.backup_path)
    logger.info("Existing directory backed up. Please delete the backup manually if not needed.")
    if os.path.isdir(name) and not os.path.islink(name):
        shutil.rmtree(name)
    else:
        os.remove(name)
    return True


def open_in_ide(path: str) -> None:
    """Open ``path`` in IntelliJ IDEA if a launcher can be found."""
    if shutil.which("idea"):
        subprocess.run(["idea", path], check=False)
        logger.info("Opening in IntelliJ IDEA...")
    elif shutil.which("open"):
        result = subprocess.run(["open", "-a", "IntelliJ IDEA", path], check=False)
        if result.returncode != 0:
            logger.warning("IntelliJ IDEA not found")
    else:
        logger.warning("IntelliJ IDEA not found")


def _load_document(settings: Settings) -> Tuple[Optional[str], Optional[MetadataDocument]]:
    """Fetch and validate metadata; the document is None after logging the reason."""
    try:
        raw = fetch_metadata(settings.api_url, timeout=settings.request_timeout)
    except FetchError as exc:
        logger.error("%s", exc)
        logger.error("Failed to fetch metadata. Check internet connection.")
        return None, None
    document = load_metadata(raw)
    if document is None:
        logger.error("Invalid metadata JSON received from %s", settings.api_url)
    return raw, document


def _generate(project: ProjectRequest, settings: Settings) -> Optional[str]:
    try:
        return generate_project(project, api_url=settings.api_url, timeout=settings.request_timeout)
    except GenerationError as exc:
        logger.error("%s", exc)
        for hint in exc.hints:
            logger.warning("  %s", hint)
        return None


def run_interactive(settings: Settings, input_fn: InputFn = input, use_fzf: Optional[bool] = None) -> ExitCodes:
    """Walk the user through every option and generate the project."""
    print(BANNER)
    logger.warning("DEVELOPMENT VERSION - Errors may occur")
    logger.info("Tip: If pom.xml version errors occur, remove -BUILD or -RELEASE suffixes and rebuild")

    raw, document = _load_document(settings)
    if document is None:
        return ExitCodes.CONNECTION_ERROR
    logger.info("Metadata loaded successfully")

    name = get_input("Project name", Constants.DEFAULT_PROJECT_NAME, input_fn)
    try:
        if not prepare_target(name, settings, input_fn):
            logger.info("Cancelled")
            return ExitCodes.SUCCESS
    except (BackupError, OSError) as exc:
        logger.error("%s", exc)
        return ExitCodes.FILE_ERROR

    picks = {}
    steps = (
        ("type", "Project Type", MetadataCategories.TYPE),
        ("language", "Language", MetadataCategories.LANGUAGE),
        ("boot_version", "Spring Boot Version", MetadataCategories.BOOT_VERSION),
        ("java_version", "Java Version", MetadataCategories.JAVA_VERSION),
        ("packaging", "Packaging", MetadataCategories.PACKAGING),
    )
    for key, title, cat in steps:
        print(f"\nSelecting {title}...")
        category = document.category(cat.value)
        options = category.values if category else ()
        default = category.default if category else None
        selected = pick_one(title, options, default=default, use_fzf=use_fzf, input_fn=input_fn)
        if selected is None:
            logger.info("Cancelled")
            return ExitCodes.SUCCESS
        picks[key] = selected

    picks["boot_version"] = make_resolver(settings).resolve(document, picks["boot_version"])

    group = get_input("Group ID", Constants.DEFAULT_GROUP_ID, input_fn)
    artifact = get_input("Artifact ID", name, input_fn)
    package = get_input("Package name", f"{group}.{artifact}", input_fn)

    print("\nSelecting Dependencies...")
    entries = list(document.iter_dependencies())
    if entries:
        logger.info("Found %d dependencies", len(entries))
    else:
        logger.warning("No dependencies found in metadata")
        try:
            logger.warning("Raw metadata saved to %s", save_debug_payload(raw))
        except OSError as exc:
            logger.error("Could not save raw metadata: %s", exc)
    try:
        deps = validate_dependencies(join_dependencies(pick_many(entries, use_fzf=use_fzf, input_fn=input_fn)))
    except InvalidDependencies as exc:
        logger.error("%s", exc)
        return ExitCodes.INVALID_INPUT

    project = ProjectRequest(
        name=name,
        group_id=group,
        artifact_id=artifact,
        package_name=package,
        dependencies=deps,
        **picks,
    )
    print("")
    show_summary(project)
    print("")

    if not confirm("Create project?", default=True, input_fn=input_fn):
        logger.info("Cancelled")
        return ExitCodes.SUCCESS

    print(f"Request URL: {request_url(project, settings.api_url)}")
    location = _generate(project, settings)
    if location is None:
        return ExitCodes.GENERATION_ERROR

    logger.info("Project created successfully!")
    print(f"Location: {location}")
    print(f"Run with: cd {project.name} && {project.run_hint}")

    if confirm("Open in IntelliJ IDEA?", default=False, input_fn=input_fn):
        open_in_ide(location)
    return ExitCodes.SUCCESS


def run_quick(
    settings: Settings,
    name: str = Constants.DEFAULT_PROJECT_NAME,
    dependencies: str = Constants.DEFAULT_QUICK_DEPENDENCIES,
    input_fn: InputFn = input,
) -> ExitCodes:
    """Create a Maven/Java/jar project with the latest stable versions."""
    logger.warning("DEVELOPMENT VERSION - Errors may occur")
    logger.info("Tip: If build fails, check pom.xml and remove -SNAPSHOT, -BUILD or -RELEASE version suffixes")

    try:
        deps = validate_dependencies(dependencies)
    except InvalidDependencies as exc:
        logger.error("%s", exc)
        return ExitCodes.INVALID_INPUT

    try:
        if not prepare_target(name, settings, input_fn):
            logger.info("Cancelled")
            return ExitCodes.SUCCESS
    except (BackupError, OSError) as exc:
        logger.error("%s", exc)
        return ExitCodes.FILE_ERROR

    logger.info("Quick creating Spring Boot project: %s", name)

    try:
        raw = fetch_metadata(settings.api_url, timeout=settings.request_timeout)
    except FetchError as exc:
        logger.error("%s", exc)
        return ExitCodes.CONNECTION_ERROR

    document = load_metadata(raw)
    boot_version = make_resolver(settings).resolve(document, "")
    java_version = settings.default_java
    if document is not None:
        java_version = document.default_of(MetadataCategories.JAVA_VERSION.value) or settings.default_java

    logger.info("Using Spring Boot %s, Java %s", boot_version, java_version)

    project = ProjectRequest(
        name=name,
        boot_version=boot_version,
        java_version=java_version,
        dependencies=deps,
    )
    location = _generate(project, settings)
    if location is None:
        return ExitCodes.GENERATION_ERROR

    logger.info("Project '%s' created!", name)
    print(f"Location: {location}")
    print(f"Run with: cd {name} && {project.run_hint}")
    return ExitCodes.SUCCESS
