"""Tests for pom_builder.py — mapping a project description to a descriptor model."""

import dataclasses

import pytest

from pomgen.pom_builder import (
    DEFAULT_REPOSITORIES,
    ProjectDescriptionError,
    build_model,
    make_dependency,
    make_repository,
)
from pomgen.pom_models import DependencyEntry, ProjectDescription, RepositoryEntry

from conftest import SHA


class TestMakeDependency:
    def test_namespaced_identifier(self):
        assert make_dependency(("org.clojure/clojure", "1.2.0")) == DependencyEntry(
            group_id="org.clojure", artifact_id="clojure", version="1.2.0",
        )

    def test_bare_identifier(self):
        assert make_dependency(("foo", "0.1")) == DependencyEntry(
            group_id="foo", artifact_id="foo", version="0.1",
        )


class TestMakeRepository:
    def test_pair(self):
        assert make_repository(("clojars", "http://clojars.org/repo/")) == RepositoryEntry(
            id="clojars", url="http://clojars.org/repo/",
        )


class TestDefaultRepositories:
    def test_fixed_table(self):
        assert list(DEFAULT_REPOSITORIES) == ["central", "clojure-snapshots", "clojars"]

    def test_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_REPOSITORIES["central"] = "http://example.org"


class TestBuildModel:
    def test_identity_fields(self, simple_project):
        model = build_model(simple_project)
        assert model.model_version == "4.0.0"
        assert model.artifact_id == "proj"
        assert model.name == "proj"
        assert model.version == "1.0.0-SNAPSHOT"
        assert model.group_id == "org.example"
        assert model.description == "A sample project"

    def test_dependencies_in_order(self, simple_project):
        model = build_model(simple_project)
        assert model.dependencies == [
            DependencyEntry("org.clojure", "clojure", "1.2.0"),
            DependencyEntry("swank-clojure", "swank-clojure", "1.2.1"),
        ]

    def test_no_git_dir_means_no_scm(self, simple_project):
        model = build_model(simple_project)
        assert model.scm is None

    def test_user_repositories_then_defaults(self, simple_project):
        model = build_model(simple_project)
        assert [(r.id, r.url) for r in model.repositories] == [
            ("snapshots", "http://example.org/snapshots"),
            ("central", "http://repo1.maven.org/maven2"),
            ("clojure-snapshots", "http://build.clojure.org/snapshots"),
            ("clojars", "http://clojars.org/repo/"),
        ]

    def test_redeclared_default_kept(self, simple_project):
        project = dataclasses.replace(
            simple_project, repositories=(("central", "http://mirror.example.org/maven2"),),
        )
        ids = [r.id for r in build_model(project).repositories]
        assert ids == ["central", "central", "clojure-snapshots", "clojars"]

    def test_repositories_as_mapping(self, simple_project):
        project = dataclasses.replace(simple_project, repositories={"a": "http://a", "b": "http://b"})
        ids = [r.id for r in build_model(project).repositories]
        assert ids[:2] == ["a", "b"]
        assert len(ids) == 5

    def test_scm_from_project_root(self, simple_project, github_repo):
        model = build_model(simple_project)
        assert model.scm is not None
        assert model.scm.tag == SHA
        assert model.scm.url == "http://github.com/alice/proj"

    def test_fresh_model_per_call(self, simple_project):
        first = build_model(simple_project)
        first.dependencies.clear()
        assert len(build_model(simple_project).dependencies) == 2

    def test_missing_name(self, tmp_path):
        project = ProjectDescription(name="", version="1.0", group="g", root=tmp_path)
        with pytest.raises(ProjectDescriptionError, match="name"):
            build_model(project)

    def test_missing_version(self, tmp_path):
        project = ProjectDescription(name="proj", version=None, group="g", root=tmp_path)
        with pytest.raises(ProjectDescriptionError, match="version"):
            build_model(project)

    def test_non_string_version(self, tmp_path):
        project = ProjectDescription(name="proj", version=1.0, group="g", root=tmp_path)
        with pytest.raises(ProjectDescriptionError, match="must be a non-empty string"):
            build_model(project)
