"""POM generation data model classes.

Pure data structures for the project description handed to the generator and
the descriptor model it produces. No behavior or imports from other pomgen
modules.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# The only POM model version Maven 2/3 understands.
MODEL_VERSION = "4.0.0"


@dataclass(frozen=True)
class ProjectDescription:
    """A project as declared in the build tool's own project file.

    Attributes:
        name: Project name; becomes the POM ``<artifactId>`` and ``<name>``.
        version: Project version string (not validated).
        group: Maven groupId for the project.
        description: Free-form description, or ``None``.
        dependencies: Ordered ``(identifier, version)`` pairs. The identifier
            may carry a group prefix, e.g. ``org.clojure/clojure``.
        repositories: Ordered ``(id, url)`` pairs of user-declared repositories.
        root: Project root directory (where ``.git`` is looked up).
    """
    name: str
    version: str
    group: str
    description: Optional[str] = None
    dependencies: tuple = ()
    repositories: tuple = ()
    root: Path = field(default_factory=Path.cwd)


@dataclass(frozen=True)
class GithubUrls:
    """Canonical URLs derived from a GitHub ``origin`` remote."""
    public_clone: str
    dev_clone: str
    browse: str


@dataclass
class ScmRecord:
    """A POM ``<scm>`` element.

    Attributes:
        url: Browsable repository URL.
        tag: Commit SHA1 that HEAD resolved to.
        connection: ``scm:git:`` read-only clone URL, if known.
        developer_connection: ``scm:git:`` read/write clone URL, if known.
    """
    url: Optional[str]
    tag: str
    connection: Optional[str] = None
    developer_connection: Optional[str] = None


@dataclass
class DependencyEntry:
    """A POM ``<dependency>`` element (GAV coordinates only)."""
    group_id: str
    artifact_id: str
    version: Optional[str] = None


@dataclass
class RepositoryEntry:
    """A POM ``<repository>`` element."""
    id: str
    url: str


@dataclass
class DescriptorModel:
    """The in-memory POM, ready for serialization.

    ``repositories`` holds the user-declared entries followed by the default
    repositories. ``scm`` is ``None`` when no usable git metadata was found.
    """
    artifact_id: str
    name: str
    version: str
    group_id: str
    description: Optional[str] = None
    model_version: str = MODEL_VERSION
    dependencies: list = field(default_factory=list)
    repositories: list = field(default_factory=list)
    scm: Optional[ScmRecord] = None
