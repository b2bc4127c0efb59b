"""spring-cli - Spring Initializr command-line front end.

    Returns:
        int: Exit code
"""
import logging
import os
import sys

from args import parse_args
from cli_config import load_settings
from cli_create import run_interactive, run_quick
from cli_inspect import check_version, debug_metadata, list_dependencies, show_versions
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes
from errors import BackupError
from project.backup import backup_path

HELP_TEXT = f"""\
Spring Initializr CLI Tool v{Constants.VERSION}
This tool is in development - errors may occur with version handling

Usage:
  spring-cli                        - Interactive mode with FZF (recommended)
  spring-cli quick <name> [deps]    - Quick create with defaults
  spring-cli list-deps              - List all available dependencies
  spring-cli versions               - Show available Spring Boot & Java versions
  spring-cli debug                  - Inspect metadata and version resolution
  spring-cli test-version <v>       - Check whether the API accepts a boot version
  spring-cli backup <path>          - Back up a file or directory
  spring-cli help                   - Show this help

Examples:
  spring-cli
  spring-cli quick my-api web,data-jpa,lombok
  spring-cli list-deps

Optional:
  fzf - fuzzy picker used by interactive mode (a numbered prompt is used without it)

Environment Variables:
  {Constants.ENV_DEFAULT_JAVA:<29} - Set default Java version (default: {Constants.DEFAULT_JAVA})
  {Constants.ENV_VERIFY_VERSION:<29} - Enable API version verification (slower)
  {Constants.ENV_BACKUP_DIR:<29} - Backup directory (default: {Constants.DEFAULT_BACKUP_DIR})
  {Constants.ENV_API_URL:<29} - Initializr base URL (default: {Constants.SPRING_API})
  {Constants.ENV_TIMEOUT:<29} - HTTP timeout in seconds (default: {Constants.REQUEST_TIMEOUT})
  {Constants.ENV_LOG_LEVEL:<29} - Log level (default: INFO)

Known Issues:
  • Version suffixes (-BUILD, -RELEASE) may cause issues
  • If project fails to build, manually edit pom.xml/build.gradle
  • Remove version suffixes and the project should work
"""


def show_help() -> None:
    print(HELP_TEXT)


def _setup_logging(args) -> None:
    """Configure logging from --loglevel/--logfile, falling back to the environment."""
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    level_name = os.environ.get(Constants.ENV_LOG_LEVEL, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    configure_logging(level=level, log_file=getattr(args, "LOG_FILE", None))


def dispatch(args, settings) -> ExitCodes:
    """Run the command selected on the command line."""
    action = args.action
    if action == "interactive":
        return run_interactive(settings)
    if action == "quick":
        return run_quick(settings, args.name, args.dependencies)
    if action == "list-deps":
        return list_dependencies(settings)
    if action == "versions":
        return show_versions(settings)
    if action == "debug":
        return debug_metadata(settings)
    if action == "test-version":
        return check_version(settings, args.boot_version)
    if action == "backup":
        try:
            backup_path(args.path, settings.backup_path)
        except BackupError as exc:
            logging.error("%s", exc)
            return ExitCodes.FILE_ERROR
        return ExitCodes.SUCCESS
    if action == "help":
        show_help()
        return ExitCodes.SUCCESS
    logging.error("Unknown command: %s", action)
    show_help()
    return ExitCodes.INVALID_INPUT


def main(argv=None):
    """Main function of the program."""
    logger = logging.getLogger(__name__)

    args = parse_args(argv)
    _setup_logging(args)
    settings = load_settings(args)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(
                event="function_entry",
                component="cli",
                action=args.action,
                target=settings.api_url,
                verify=settings.verify_version
            )
        )

    try:
        code = dispatch(args, settings)
    except (KeyboardInterrupt, EOFError):
        print("")
        logging.warning("Operation cancelled")
        code = ExitCodes.SUCCESS

    if is_debug_enabled(logger):
        logger.debug(
            "CLI finished",
            extra=extra_context(event="function_exit", component="cli", action=args.action, outcome=code.name)
        )
    sys.exit(code.value)


if __name__ == "__main__":
    main()
