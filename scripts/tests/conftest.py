"""Shared test fixtures for the pom generation test suite."""

import textwrap
from pathlib import Path

import pytest

from pomgen.pom_models import ProjectDescription

SHA = "3f786850e387550fdab836ed7e6dc881de23001b"


@pytest.fixture
def git_repo(tmp_path):
    """Factory fixture that lays out a minimal ``.git`` directory and returns its path.

    ``head`` is written verbatim to HEAD; ``refs`` maps ref paths to contents;
    ``config`` is dedented and written to ``.git/config`` when given.
    """
    def _make(head: str = "ref: refs/heads/main\n", refs: dict = None, config: str = None) -> Path:
        git_dir = tmp_path / ".git"
        git_dir.mkdir(exist_ok=True)
        (git_dir / "HEAD").write_text(head, encoding="utf-8")
        for ref_path, content in (refs or {}).items():
            ref_file = git_dir / ref_path
            ref_file.parent.mkdir(parents=True, exist_ok=True)
            ref_file.write_text(content, encoding="utf-8")
        if config is not None:
            (git_dir / "config").write_text(textwrap.dedent(config), encoding="utf-8")
        return git_dir
    return _make


@pytest.fixture
def github_repo(git_repo):
    """A repository on branch main whose origin is a GitHub SSH remote."""
    return git_repo(
        refs={"refs/heads/main": SHA + "\n"},
        config="""\
            [core]
            \trepositoryformatversion = 0
            [remote "origin"]
            \turl = git@github.com:alice/proj.git
            \tfetch = +refs/heads/*:refs/remotes/origin/*
            [branch "main"]
            \tremote = origin
        """,
    )


@pytest.fixture
def simple_project(tmp_path):
    """A project with one namespaced and one bare dependency and no git repository."""
    return ProjectDescription(
        name="proj",
        version="1.0.0-SNAPSHOT",
        group="org.example",
        description="A sample project",
        dependencies=(
            ("org.clojure/clojure", "1.2.0"),
            ("swank-clojure", "1.2.1"),
        ),
        repositories=(("snapshots", "http://example.org/snapshots"),),
        root=tmp_path,
    )
