"""Raw git repository state, read straight from a ``.git`` directory.

No ``git`` executable is required: HEAD and the origin URL are read from the
files git itself keeps on disk. Missing files surface as ``FileNotFoundError``
so callers can treat "no repository" as a normal outcome.
"""

import re
from pathlib import Path
from typing import Optional

ORIGIN_SECTION = '[remote "origin"]'

_REF_RE = re.compile(r"ref: (\S+)")
_URL_RE = re.compile(r"url\s*=\s*(\S*)\s*")

# Config scanner states
_SEEKING, _IN_SECTION, _DONE = "seeking", "in-section", "done"


def read_git_ref(git_dir: Path, ref_path: str) -> str:
    """Read the commit SHA1 stored in a ref file such as ``refs/heads/main``."""
    return (Path(git_dir) / ref_path).read_text(encoding="utf-8").strip()


def read_head(git_dir: Path) -> str:
    """Resolve ``HEAD`` to a commit SHA1.

    A symbolic HEAD (``ref: refs/heads/<branch>``) is followed one hop to the
    branch ref file. A detached HEAD already holds the SHA1.

    Args:
        git_dir: Path to the ``.git`` directory.

    Returns:
        The commit SHA1 as a stripped string.

    Raises:
        FileNotFoundError: If ``git_dir``, ``HEAD`` or the referenced ref file
            does not exist (e.g. a branch only present in ``packed-refs``).
    """
    head = (Path(git_dir) / "HEAD").read_text(encoding="utf-8").strip()
    match = _REF_RE.search(head)
    if match:
        return read_git_ref(git_dir, match.group(1))
    return head


def read_origin(git_dir: Path) -> Optional[str]:
    """Read the URL of the ``origin`` remote from ``git_dir/config``.

    Lines are stripped before matching. Scanning starts at the exact
    ``[remote "origin"]`` header and stops at the next line starting with
    ``[``; the first whole-line ``url = <value>`` inside wins.

    Args:
        git_dir: Path to the ``.git`` directory.

    Returns:
        The origin URL, or ``None`` if the section or its ``url`` key is absent.

    Raises:
        FileNotFoundError: If the config file does not exist.
    """
    state = _SEEKING
    url = None
    # git stores config values as raw bytes; only ASCII keys and URLs matter here
    with open(Path(git_dir) / "config", encoding="utf-8", errors="replace") as f:
        for raw in f:
            line = raw.strip()
            if state == _SEEKING:
                if line == ORIGIN_SECTION:
                    state = _IN_SECTION
            elif state == _IN_SECTION:
                if line.startswith("["):
                    state = _DONE
                else:
                    match = _URL_RE.fullmatch(line)
                    if match:
                        url = match.group(1)
                        state = _DONE
            if state == _DONE:
                break
    return url

