"""Tests for command line parsing."""

import pytest

from args import parse_args


class TestCommands:
    """Subcommands and their aliases."""

    def test_default_is_interactive(self):
        assert parse_args([]).action == "interactive"

    def test_quick_defaults(self):
        ns = parse_args(["quick"])
        assert ns.action == "quick"
        assert ns.name == "demo"
        assert ns.dependencies == "web"

    def test_quick_with_values(self):
        ns = parse_args(["quick", "shop", "web,data-jpa"])
        assert ns.name == "shop"
        assert ns.dependencies == "web,data-jpa"

    @pytest.mark.parametrize("argv, action", [
        (["deps"], "list-deps"),
        (["list-deps"], "list-deps"),
        (["vers"], "versions"),
        (["versions"], "versions"),
        (["debug"], "debug"),
        (["help"], "help"),
    ])
    def test_aliases(self, argv, action):
        assert parse_args(argv).action == action

    def test_test_version(self):
        ns = parse_args(["test-boot-version", "3.5.6.RELEASE"])
        assert ns.action == "test-version"
        assert ns.boot_version == "3.5.6.RELEASE"

    def test_backup(self):
        ns = parse_args(["backup", "./demo"])
        assert ns.action == "backup"
        assert ns.path == "./demo"

    def test_unknown_command_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["frobnicate"])


class TestGlobalOptions:

    def test_options(self):
        ns = parse_args([
            "--loglevel", "debug",
            "--api-url", "http://local:8080",
            "--java", "17",
            "--verify",
            "--timeout", "5",
            "--backup-dir", "/tmp/bk",
            "-c", "cfg.yml",
            "versions",
        ])
        assert ns.LOG_LEVEL == "DEBUG"
        assert ns.API_URL == "http://local:8080"
        assert ns.DEFAULT_JAVA == "17"
        assert ns.VERIFY_VERSION is True
        assert ns.TIMEOUT == 5.0
        assert ns.BACKUP_DIR == "/tmp/bk"
        assert ns.CONFIG == "cfg.yml"
        assert ns.action == "versions"

    def test_unset_options(self):
        ns = parse_args(["quick"])
        assert ns.VERIFY_VERSION is False
        assert ns.API_URL is None
        assert ns.LOG_LEVEL is None
