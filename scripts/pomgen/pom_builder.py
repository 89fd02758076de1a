"""Map a ProjectDescription onto a DescriptorModel.

Handles dependency coordinate splitting, repository merging with the default
repository table, and attaching git SCM metadata from the project root.
"""

from pathlib import Path
from types import MappingProxyType

from .pom_models import DependencyEntry, DescriptorModel, ProjectDescription, RepositoryEntry
from .scm import make_scm

# Repositories every generated POM lists after the user-declared ones.
# Order matters: it is the order they are written to pom.xml.
DEFAULT_REPOSITORIES = MappingProxyType({
    "central": "http://repo1.maven.org/maven2",
    "clojure-snapshots": "http://build.clojure.org/snapshots",
    "clojars": "http://clojars.org/repo/",
})


class ProjectDescriptionError(ValueError):
    """The project description is missing a required identity field."""


def make_dependency(dep) -> DependencyEntry:
    """Convert an ``(identifier, version)`` pair into a DependencyEntry.

    ``org.clojure/clojure`` becomes group ``org.clojure``, artifact
    ``clojure``. An identifier without a ``/`` is used as both the group and
    the artifact.
    """
    identifier, version = dep
    group_id, sep, artifact_id = identifier.rpartition("/")
    if not sep or not group_id:
        group_id = artifact_id
    return DependencyEntry(group_id=group_id, artifact_id=artifact_id, version=version)


def make_repository(repo) -> RepositoryEntry:
    repo_id, url = repo
    return RepositoryEntry(id=repo_id, url=url)


def _validate(project: ProjectDescription):
    for attr in ("name", "version"):
        value = getattr(project, attr, None)
        if not isinstance(value, str) or not value.strip():
            raise ProjectDescriptionError(f"project field '{attr}' must be a non-empty string")


def build_model(project: ProjectDescription) -> DescriptorModel:
    """Build the descriptor model for a project.

    Default repositories are always appended after the user-declared ones,
    even when the user redeclares one of their ids. SCM metadata is read from
    ``<project.root>/.git`` and left as ``None`` when unavailable.

    Args:
        project: The loaded project description.

    Returns:
        A new DescriptorModel.

    Raises:
        ProjectDescriptionError: If ``name`` or ``version`` is missing or blank.
    """
    _validate(project)

    user_repos = project.repositories
    if hasattr(user_repos, "items"):
        user_repos = user_repos.items()
    repos = list(user_repos) + list(DEFAULT_REPOSITORIES.items())
    return DescriptorModel(
        artifact_id=project.name,
        name=project.name,
        version=project.version,
        group_id=project.group,
        description=project.description,
        dependencies=[make_dependency(dep) for dep in project.dependencies],
        repositories=[make_repository(repo) for repo in repos],
        scm=make_scm(Path(project.root) / ".git"),
    )
