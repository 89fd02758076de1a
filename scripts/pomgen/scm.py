"""Assemble the POM ``<scm>`` record from a local git repository."""

import sys
from pathlib import Path
from typing import Optional

from .git_metadata import read_head, read_origin
from .github_urls import github_urls
from .pom_models import ScmRecord


def make_scm(git_dir: Path) -> Optional[ScmRecord]:
    """Build an ScmRecord for the repository at ``git_dir``.

    A missing or unreadable repository (no ``.git``, no ``HEAD``, no config, a
    dangling branch ref, or a file that is a directory or lacks read
    permission) yields ``None`` silently. An ``origin`` that is absent or not a
    GitHub remote also yields ``None``, with a warning on stderr, so the POM
    never carries a ``<scm>`` element without a browse URL.

    Args:
        git_dir: Path to the ``.git`` directory of the project.

    Returns:
        A populated ScmRecord, or ``None`` if no usable metadata was found.
    """
    try:
        origin = read_origin(git_dir)
        head = read_head(git_dir)
    except (FileNotFoundError, NotADirectoryError, IsADirectoryError, PermissionError):
        return None

    urls = github_urls(origin)
    if urls is None:
        if origin:
            print(f"WARNING: origin '{origin}' is not a GitHub remote, "
                  f"omitting <scm> from pom.xml", file=sys.stderr)
        else:
            print(f"WARNING: no origin remote in {git_dir}, omitting <scm> from pom.xml",
                  file=sys.stderr)
        return None

    return ScmRecord(
        url=urls.browse,
        tag=head,
        connection=f"scm:git:{urls.public_clone}",
        developer_connection=f"scm:git:{urls.dev_clone}",
    )
