"""Read a generated ``pom.xml`` back into a DescriptorModel.

Used to check what was written: handles both namespaced and non-namespaced
POM files and ignores comments such as the autogenerated-file disclaimer.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

from .pom_models import DependencyEntry, DescriptorModel, RepositoryEntry, ScmRecord

# XML namespace used by Maven POM files (POM model version 4.0.0).
NS = {"m": "http://maven.apache.org/POM/4.0.0"}


def _find(el, tag, ns=NS):
    """Find a direct child XML element, trying with and without the Maven namespace.

    Returns:
        The first matching child element, or ``None`` if not found.
    """
    result = el.find(f"m:{tag}", ns)
    if result is not None:
        return result
    return el.find(tag)


def _findall(el, tag, ns=NS):
    return list(el.findall(f"m:{tag}", ns)) + list(el.findall(tag))


def _text(el, tag, ns=NS):
    """Stripped text of a child element, or ``None`` if missing or empty."""
    child = _find(el, tag, ns)
    if child is not None and child.text:
        return child.text.strip()
    return None


def _parse_scm(scm_el) -> ScmRecord:
    return ScmRecord(
        url=_text(scm_el, "url"),
        tag=_text(scm_el, "tag"),
        connection=_text(scm_el, "connection"),
        developer_connection=_text(scm_el, "developerConnection"),
    )


def read_descriptor(source: Union[Path, str, bytes]) -> DescriptorModel:
    """Parse ``pom.xml`` content into a DescriptorModel.

    Args:
        source: Path to a pom.xml file, or the raw document bytes.

    Returns:
        A DescriptorModel. ``scm`` is ``None`` when the POM has no ``<scm>``.
    """
    if isinstance(source, bytes):
        root = ET.fromstring(source)
    else:
        root = ET.parse(source).getroot()

    dependencies = []
    deps_el = _find(root, "dependencies")
    if deps_el is not None:
        for dep_el in _findall(deps_el, "dependency"):
            dependencies.append(DependencyEntry(
                group_id=_text(dep_el, "groupId") or "",
                artifact_id=_text(dep_el, "artifactId") or "",
                version=_text(dep_el, "version"),
            ))

    repositories = []
    repos_el = _find(root, "repositories")
    if repos_el is not None:
        for repo_el in _findall(repos_el, "repository"):
            repo_url = _text(repo_el, "url")
            if repo_url:
                repositories.append(RepositoryEntry(id=_text(repo_el, "id") or "unknown", url=repo_url))

    scm_el = _find(root, "scm")
    return DescriptorModel(
        model_version=_text(root, "modelVersion") or "",
        group_id=_text(root, "groupId") or "",
        artifact_id=_text(root, "artifactId") or "",
        version=_text(root, "version") or "",
        name=_text(root, "name") or "",
        description=_text(root, "description"),
        dependencies=dependencies,
        repositories=repositories,
        scm=_parse_scm(scm_el) if scm_el is not None else None,
    )
