"""GitHub remote URL parsing and canonical URL derivation.

Pure string logic with no file I/O. Only the two remote shapes git writes for
GitHub clones are recognized; anything else is simply "not GitHub".
"""

import re
from typing import Optional

from .pom_models import GithubUrls

# [git@]github.com:<owner>/<repo>.git
_SSH_SHORTHAND_RE = re.compile(r"(?:git@)?github.com:([^/]+)/([^/]+).git")
# <scheme>://[git@]github.com/<owner>/<repo>.git
_FULL_URL_RE = re.compile(r"[^:]+://(?:git@)?github.com/([^/]+)/([^/]+).git")


def parse_github_url(url: Optional[str]) -> Optional[tuple]:
    """Split a GitHub remote URL into ``(owner, repo)``.

    The whole URL must match; the ``.git`` suffix is required.

    Args:
        url: Remote URL as found in ``.git/config``, or ``None``.

    Returns:
        An ``(owner, repo)`` tuple, or ``None`` if the URL is not GitHub-shaped.
    """
    if not url:
        return None
    match = _SSH_SHORTHAND_RE.fullmatch(url) or _FULL_URL_RE.fullmatch(url)
    if match:
        return match.group(1), match.group(2)
    return None


def github_urls(url: Optional[str]) -> Optional[GithubUrls]:
    """Derive the public clone, developer clone and browse URLs for a remote.

    Returns:
        A GithubUrls instance, or ``None`` when ``url`` is not a GitHub remote.
    """
    parsed = parse_github_url(url)
    if parsed is None:
        return None
    owner, repo = parsed
    return GithubUrls(
        public_clone=f"git://github.com/{owner}/{repo}.git",
        dev_clone=f"ssh://git@github.com/{owner}/{repo}.git",
        browse=f"http://github.com/{owner}/{repo}",
    )
