"""Tests for the interactive and quick create flows."""

import json
from unittest.mock import patch

import pytest

from cli_config import Settings
from conftest import build_metadata
from cli_create import prepare_target, run_interactive, run_quick
from constants import ExitCodes
from errors import FetchError, GenerationError


def _answers(*values):
    it = iter(values)
    return lambda prompt: next(it)


@pytest.fixture
def settings(tmp_path):
    return Settings(backup_dir=str(tmp_path / "backups"))


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


class TestQuickCreate:
    """run_quick() with the network stubbed."""

    @patch("cli_create.generate_project")
    @patch("cli_create.fetch_metadata")
    def test_uses_metadata_defaults(self, mock_fetch, mock_generate, settings, workdir, metadata_json):
        """Test boot and Java versions come from metadata."""
        mock_fetch.return_value = metadata_json
        mock_generate.return_value = str(workdir / "demo")

        assert run_quick(settings, "demo", "web,data-jpa") is ExitCodes.SUCCESS

        project = mock_generate.call_args.args[0]
        assert project.boot_version == "3.5.6"
        assert project.java_version == "21"
        assert project.type == "maven-project"
        assert project.dependencies == "web,data-jpa"

    @patch("cli_create.generate_project")
    @patch("cli_create.fetch_metadata")
    def test_invalid_metadata_uses_fallbacks(self, mock_fetch, mock_generate, workdir):
        """Test fallback constants when the payload is not JSON."""
        mock_fetch.return_value = "<html/>"
        mock_generate.return_value = str(workdir / "demo")

        assert run_quick(Settings(default_java="17"), "demo", "web") is ExitCodes.SUCCESS

        project = mock_generate.call_args.args[0]
        assert project.boot_version == "3.5.6"
        assert project.java_version == "17"

    @patch("cli_create.fetch_metadata")
    def test_invalid_dependencies(self, mock_fetch, settings, workdir):
        assert run_quick(settings, "demo", "web&x=1") is ExitCodes.INVALID_INPUT
        mock_fetch.assert_not_called()

    @patch("cli_create.fetch_metadata")
    def test_fetch_failure(self, mock_fetch, settings, workdir):
        mock_fetch.side_effect = FetchError("Failed to fetch metadata: refused")

        assert run_quick(settings, "demo", "web") is ExitCodes.CONNECTION_ERROR

    @patch("cli_create.generate_project")
    @patch("cli_create.fetch_metadata")
    def test_generation_failure(self, mock_fetch, mock_generate, settings, workdir, metadata_json):
        mock_fetch.return_value = metadata_json
        mock_generate.side_effect = GenerationError("Server error (HTTP 500)", status_code=500, hints=["hint"])

        assert run_quick(settings, "demo", "web") is ExitCodes.GENERATION_ERROR

    @patch("cli_create.fetch_metadata")
    def test_declined_overwrite(self, mock_fetch, settings, workdir):
        (workdir / "demo").mkdir()

        assert run_quick(settings, "demo", "web", input_fn=_answers("n")) is ExitCodes.SUCCESS
        mock_fetch.assert_not_called()
        assert (workdir / "demo").exists()


class TestPrepareTarget:

    def test_absent_target(self, settings, workdir):
        assert prepare_target("demo", settings) is True

    def test_overwrite_backs_up_then_removes(self, settings, workdir, tmp_path):
        (workdir / "demo").mkdir()
        (workdir / "demo" / "pom.xml").write_text("old")

        assert prepare_target("demo", settings, _answers("y")) is True

        assert not (workdir / "demo").exists()
        backups = list((tmp_path / "backups").iterdir())
        assert len(backups) == 1
        assert backups[0].name.startswith("demo.bak.sb.")
        assert (backups[0] / "pom.xml").read_text() == "old"


class TestInteractive:
    """run_interactive() with the numbered pickers."""

    @patch("cli_create.generate_project")
    @patch("cli_create.fetch_metadata")
    def test_full_walkthrough(self, mock_fetch, mock_generate, settings, workdir, metadata_json):
        """Test answers flow into the generated project."""
        mock_fetch.return_value = metadata_json
        mock_generate.return_value = str(workdir / "shop")
        answers = _answers(
            "shop",          # project name
            "2",             # type
            "",              # language -> default java
            "3.4.10",        # boot version
            "17",            # java version
            "",              # packaging -> default jar
            "org.acme",      # group
            "",              # artifact -> name
            "",              # package -> group.artifact
            "1,3",           # dependencies
            "",              # create -> yes
            "",              # open in IDE -> no
        )

        assert run_interactive(settings, input_fn=answers, use_fzf=False) is ExitCodes.SUCCESS

        project = mock_generate.call_args.args[0]
        assert project.name == "shop"
        assert project.type == "gradle-project"
        assert project.language == "java"
        assert project.boot_version == "3.4.10"
        assert project.java_version == "17"
        assert project.packaging == "jar"
        assert project.group_id == "org.acme"
        assert project.artifact_id == "shop"
        assert project.package_name == "org.acme.shop"
        assert project.dependencies == "web,data-jpa"

    @patch("cli_create.generate_project")
    @patch("cli_create.fetch_metadata")
    def test_decline_create(self, mock_fetch, mock_generate, settings, workdir, metadata_json):
        mock_fetch.return_value = metadata_json
        answers = _answers("demo", "", "", "", "", "", "", "", "", "", "n")

        assert run_interactive(settings, input_fn=answers, use_fzf=False) is ExitCodes.SUCCESS
        mock_generate.assert_not_called()

    @patch("cli_create.save_debug_payload")
    @patch("cli_create.generate_project")
    @patch("cli_create.fetch_metadata")
    def test_missing_dependencies_saves_payload(self, mock_fetch, mock_generate, mock_save, settings, workdir):
        """Test the raw payload is kept when metadata lists no dependencies."""
        payload = json.dumps(build_metadata(include_deps=False))
        mock_fetch.return_value = payload
        mock_generate.return_value = str(workdir / "demo")
        mock_save.return_value = "/tmp/spring-metadata-debug.json"
        answers = _answers("demo", "", "", "1", "", "", "", "", "", "", "")

        assert run_interactive(settings, input_fn=answers, use_fzf=False) is ExitCodes.SUCCESS

        mock_save.assert_called_once_with(payload)
        assert mock_generate.call_args.args[0].dependencies == ""

    @patch("cli_create.fetch_metadata")
    def test_fetch_failure(self, mock_fetch, settings, workdir):
        mock_fetch.side_effect = FetchError("Failed to fetch metadata: timeout")

        assert run_interactive(settings, input_fn=_answers(), use_fzf=False) is ExitCodes.CONNECTION_ERROR

    @patch("cli_create.fetch_metadata")
    def test_invalid_metadata(self, mock_fetch, settings, workdir):
        mock_fetch.return_value = "{not json"

        assert run_interactive(settings, input_fn=_answers(), use_fzf=False) is ExitCodes.CONNECTION_ERROR

    @patch("cli_create.pick_one")
    @patch("cli_create.fetch_metadata")
    def test_cancel_picker(self, mock_fetch, mock_pick, settings, workdir, metadata_json):
        mock_fetch.return_value = metadata_json
        mock_pick.return_value = None

        assert run_interactive(settings, input_fn=_answers("demo"), use_fzf=False) is ExitCodes.SUCCESS
