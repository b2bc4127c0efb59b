"""Argument parsing functionality for spring-cli."""

import argparse

from constants import Constants

ACTION_ALIASES = {
    "deps": "list-deps",
    "vers": "versions",
    "test-boot-version": "test-version",
}


def build_parser():
    """Build the top-level parser and its subcommands."""
    parser = argparse.ArgumentParser(
        prog="spring-cli",
        description="Spring Initializr CLI - create Spring Boot projects from the terminal",
        add_help=True,
    )

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to a YAML configuration file",
                        action="store",
                        type=str)
    parser.add_argument("--api-url",
                        dest="API_URL",
                        help=f"Initializr base URL (default: {Constants.SPRING_API})",
                        action="store",
                        type=str)
    parser.add_argument("--java",
                        dest="DEFAULT_JAVA",
                        help=f"Fallback Java version (default: {Constants.DEFAULT_JAVA})",
                        action="store",
                        type=str)
    parser.add_argument("--verify",
                        dest="VERIFY_VERSION",
                        help="Verify unknown boot versions against the API (slower)",
                        action="store_true")
    parser.add_argument("--timeout",
                        dest="TIMEOUT",
                        help=f"HTTP timeout in seconds (default: {Constants.REQUEST_TIMEOUT})",
                        action="store",
                        type=float)
    parser.add_argument("--backup-dir",
                        dest="BACKUP_DIR",
                        help="Directory receiving backups of overwritten projects",
                        action="store",
                        type=str)

    sub = parser.add_subparsers(dest="action", metavar="command")

    sub.add_parser("interactive", help="Interactive mode with FZF (default)")

    quick = sub.add_parser("quick", help="Quick create with defaults")
    quick.add_argument("name",
                       nargs="?",
                       default=Constants.DEFAULT_PROJECT_NAME,
                       help=f"Project name (default: {Constants.DEFAULT_PROJECT_NAME})")
    quick.add_argument("dependencies",
                       nargs="?",
                       default=Constants.DEFAULT_QUICK_DEPENDENCIES,
                       help="Comma separated dependency ids (default: web)")

    sub.add_parser("list-deps", aliases=["deps"], help="List all available dependencies")
    sub.add_parser("versions", aliases=["vers"], help="Show available Spring Boot & Java versions")
    sub.add_parser("debug", help="Inspect metadata and test version resolution")

    test_version = sub.add_parser("test-version",
                                  aliases=["test-boot-version"],
                                  help="Check whether the API accepts a boot version")
    test_version.add_argument("boot_version", help="Boot version to test, e.g. 3.5.6")

    backup = sub.add_parser("backup", help="Back up a file or directory")
    backup.add_argument("path", help="File or directory to back up")

    sub.add_parser("help", help="Show usage, environment variables and known issues")

    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    ns = build_parser().parse_args(argv)
    action = ns.action or "interactive"
    ns.action = ACTION_ALIASES.get(action, action)
    return ns
