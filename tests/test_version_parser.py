"""Tests for version sanitization and prefix helpers."""

import pytest

from versioning.parser import matches_prefix, sanitize, split_fields, version_prefix


class TestSanitize:
    """sanitize() strips the affixes the API rejects."""

    @pytest.mark.parametrize("raw, expected", [
        ("3.5.6.RELEASE", "3.5.6"),
        ("3.5.6-RELEASE", "3.5.6"),
        ("3.5.6.release", "3.5.6"),
        ("3.5.6-Release", "3.5.6"),
        ("v3.5.6", "3.5.6"),
        ("V3.5.6", "3.5.6"),
        ("v3.5.6.RELEASE", "3.5.6"),
        ("3.5.6", "3.5.6"),
        ("3.5.6-SNAPSHOT", "3.5.6-SNAPSHOT"),
        ("3.5.6-M1", "3.5.6-M1"),
        ("2.1.0.BUILD-SNAPSHOT", "2.1.0.BUILD-SNAPSHOT"),
    ])
    def test_strips_known_affixes(self, raw, expected):
        assert sanitize(raw) == expected

    def test_release_only_stripped_at_end(self):
        assert sanitize("3.RELEASE.1") == "3.RELEASE.1"

    def test_v_only_stripped_at_start(self):
        assert sanitize("3.5.6v") == "3.5.6v"

    def test_release_without_separator_kept(self):
        assert sanitize("3.5.6RELEASE") == "3.5.6RELEASE"

    @pytest.mark.parametrize("raw", [None, ""])
    def test_empty_input(self, raw):
        assert sanitize(raw) == ""

    @pytest.mark.parametrize("raw", [
        "3.5.6.RELEASE", "v3.5.6", "3.5.6-RELEASE", "vv1.0.RELEASE.RELEASE", "v", "3.5.6", "x",
    ])
    def test_idempotent(self, raw):
        once = sanitize(raw)
        assert sanitize(once) == once


class TestPrefix:
    """Field splitting and prefix matching."""

    def test_split_on_dot_and_dash(self):
        assert split_fields("3.5.6-SNAPSHOT") == ["3", "5", "6", "SNAPSHOT"]

    @pytest.mark.parametrize("raw, expected", [
        ("3.5.6", "3.5.6"),
        ("3.5.6-SNAPSHOT", "3.5.6"),
        ("3.5.6.BUILD-SNAPSHOT", "3.5.6"),
        ("3.5", "3.5"),
        ("3", "3"),
        ("3..6", "3.6"),
        ("", ""),
    ])
    def test_version_prefix(self, raw, expected):
        assert version_prefix(raw) == expected

    @pytest.mark.parametrize("version_id, prefix, expected", [
        ("3.5.6", "3.5.6", True),
        ("3.5.6-SNAPSHOT", "3.5.6", True),
        ("3.5.6.RELEASE", "3.5.6", True),
        ("3.5.60", "3.5.6", True),
        ("3.4.0", "3.5", False),
        ("3.5.0", "3.5", True),
        ("3.5.0", "", False),
    ])
    def test_matches_prefix(self, version_id, prefix, expected):
        assert matches_prefix(version_id, prefix) is expected
