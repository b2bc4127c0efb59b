"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    INVALID_INPUT = 3
    GENERATION_ERROR = 4


class MetadataCategories(Enum):
    """Top-level categories advertised by the metadata endpoint.

    Args:
        Enum (string): JSON key of the category.
    """

    TYPE = "type"
    LANGUAGE = "language"
    BOOT_VERSION = "bootVersion"
    JAVA_VERSION = "javaVersion"
    PACKAGING = "packaging"
    DEPENDENCIES = "dependencies"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    VERSION = "0.1.0"
    SPRING_API = "https://start.spring.io"
    METADATA_PATH = "/metadata/client"
    STARTER_PATH = "/starter.zip"
    METADATA_ACCEPT = "application/vnd.initializr.v2.2+json, application/json;q=0.9"

    # Used when no metadata is available and no candidate was given
    FALLBACK_BOOT_VERSION = "3.5.6"
    DEFAULT_JAVA = "21"
    SNAPSHOT_MARKER = "snapshot"

    DEFAULT_PROJECT_NAME = "demo"
    DEFAULT_QUICK_DEPENDENCIES = "web"
    DEFAULT_GROUP_ID = "com.example"
    DEFAULT_PROJECT_TYPE = "maven-project"
    DEFAULT_LANGUAGE = "java"
    DEFAULT_PACKAGING = "jar"
    DEFAULT_BACKUP_DIR = "~/.spring-cli/backups"
    BACKUP_TIMESTAMP_FORMAT = "%d-%b-%Y_%Hh%Mm%Ss"
    BACKUP_SUFFIX = ".bak.sb."

    # Fixed placeholder project used by the boot version probe
    PROBE_PARAMS = {
        "type": "maven-project",
        "language": "java",
        "javaVersion": "21",
        "groupId": "com.test",
        "artifactId": "test",
        "name": "test",
        "packageName": "com.test",
        "packaging": "jar",
    }

    RESOLVER_SAMPLE_INPUTS = ["3.5.6.RELEASE", "3.5.6", "v3.5.6", "3.5.6-RELEASE", ""]
    DEBUG_BOOT_VERSION_LIMIT = 10

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    DOWNLOAD_CHUNK_SIZE = 64 * 1024

    ENV_API_URL = "SPRING_CLI_API_URL"
    ENV_DEFAULT_JAVA = "SPRING_CLI_DEFAULT_JAVA"
    ENV_VERIFY_VERSION = "SPRING_CLI_VERIFY_VERSION"
    ENV_BACKUP_DIR = "SPRING_CLI_BACKUP_DIR"
    ENV_LOG_LEVEL = "SPRING_CLI_LOG_LEVEL"
    ENV_TIMEOUT = "SPRING_CLI_TIMEOUT"

    FALSY_VALUES = ("", "0", "false", "no", "off")
