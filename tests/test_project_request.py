"""Tests for project request building and dependency validation."""

import pytest

from errors import InvalidDependencies
from project.request import ProjectRequest, join_dependencies, validate_dependencies


class TestValidateDependencies:

    @pytest.mark.parametrize("deps", ["", "web", "web,data-jpa", "spring-ai_1.0,x.y"])
    def test_accepts_id_lists(self, deps):
        assert validate_dependencies(deps) == deps

    def test_none_is_empty(self):
        assert validate_dependencies(None) == ""

    @pytest.mark.parametrize("deps", ["web&name=evil", "web data-jpa", "web;rm", "web\n", "wéb"])
    def test_rejects_other_characters(self, deps):
        with pytest.raises(InvalidDependencies):
            validate_dependencies(deps)

    def test_join_skips_empty(self):
        assert join_dependencies(["web", "", "data-jpa"]) == "web,data-jpa"


class TestProjectRequest:

    def test_derived_fields(self):
        project = ProjectRequest(name="shop")

        assert project.artifact_id == "shop"
        assert project.package_name == "com.example.shop"
        assert project.archive_name == "shop.zip"
        assert project.run_hint == "./mvnw spring-boot:run"

    def test_gradle_run_hint(self):
        assert ProjectRequest(name="x", type="gradle-project-kotlin").run_hint == "./gradlew bootRun"

    def test_params(self):
        project = ProjectRequest(
            name="shop",
            group_id="org.acme",
            boot_version="3.4.10",
            java_version="17",
            dependencies="web,data-jpa",
        )

        params = project.to_params()

        assert params["baseDir"] == "shop"
        assert params["groupId"] == "org.acme"
        assert params["packageName"] == "org.acme.shop"
        assert params["bootVersion"] == "3.4.10"
        assert params["javaVersion"] == "17"
        assert params["dependencies"] == "web,data-jpa"
        assert project.dependency_list() == ["web", "data-jpa"]

    def test_empty_dependencies_omitted(self):
        assert "dependencies" not in ProjectRequest(name="x").to_params()

    def test_invalid_dependencies_rejected(self):
        with pytest.raises(InvalidDependencies):
            ProjectRequest(name="x", dependencies="web&x=1")
