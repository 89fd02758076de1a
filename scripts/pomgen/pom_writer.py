"""POM and pom.properties serializers.

Both renderers are pure: they take model data and return bytes, leaving file
I/O to the caller.
"""

import xml.etree.ElementTree as ET
from typing import Optional

from .pom_models import DescriptorModel, ProjectDescription, ScmRecord

POM_NS = "http://maven.apache.org/POM/4.0.0"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
SCHEMA_LOCATION = f"{POM_NS} http://maven.apache.org/maven-v4_0_0.xsd"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

# A notice placed at the bottom of generated pom.xml files.
DISCLAIMER = (
    "\n<!-- This file was autogenerated by the Leiningen build tool.\n"
    "  Please do not edit it directly; instead edit project.clj and regenerate it.\n"
    "  It should not be considered canonical data. For more information see\n"
    "  http://github.com/technomancy/leiningen -->\n"
)

PROPERTIES_HEADER = "Leiningen"


def _sub(parent, tag: str, value: Optional[str]):
    """Append ``<tag>value</tag>`` to parent, skipping empty values."""
    if value:
        ET.SubElement(parent, tag).text = value


def _scm_element(parent, scm: ScmRecord):
    scm_el = ET.SubElement(parent, "scm")
    _sub(scm_el, "connection", scm.connection)
    _sub(scm_el, "developerConnection", scm.developer_connection)
    _sub(scm_el, "tag", scm.tag)
    _sub(scm_el, "url", scm.url)


def _project_element(model: DescriptorModel):
    """Build the ``<project>`` tree in the element order Maven's writer uses."""
    root = ET.Element("project", {
        "xmlns": POM_NS,
        "xmlns:xsi": XSI_NS,
        "xsi:schemaLocation": SCHEMA_LOCATION,
    })
    _sub(root, "modelVersion", model.model_version)
    _sub(root, "groupId", model.group_id)
    _sub(root, "artifactId", model.artifact_id)
    _sub(root, "version", model.version)
    _sub(root, "name", model.name)
    _sub(root, "description", model.description)

    if model.scm is not None:
        _scm_element(root, model.scm)

    if model.dependencies:
        deps_el = ET.SubElement(root, "dependencies")
        for dep in model.dependencies:
            dep_el = ET.SubElement(deps_el, "dependency")
            _sub(dep_el, "groupId", dep.group_id)
            _sub(dep_el, "artifactId", dep.artifact_id)
            _sub(dep_el, "version", dep.version)

    if model.repositories:
        repos_el = ET.SubElement(root, "repositories")
        for repo in model.repositories:
            repo_el = ET.SubElement(repos_el, "repository")
            _sub(repo_el, "id", repo.id)
            _sub(repo_el, "url", repo.url)

    return root


def render_descriptor(model: DescriptorModel, with_disclaimer: bool = False) -> bytes:
    """Serialize a DescriptorModel to ``pom.xml`` content.

    Args:
        model: The descriptor model to write.
        with_disclaimer: Append the autogenerated-file notice after the
            document body.

    Returns:
        UTF-8 encoded XML. When ``with_disclaimer`` is set the output ends
        with DISCLAIMER exactly.
    """
    root = _project_element(model)
    ET.indent(root, space="  ")
    content = XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"
    if with_disclaimer:
        content += DISCLAIMER
    return content.encode("utf-8")


def _escape_property(text: str, is_key: bool) -> str:
    """Escape a key or value the way ``java.util.Properties.store`` does."""
    out = []
    for i, ch in enumerate(text):
        if ch == " ":
            out.append("\\ " if is_key or i == 0 else " ")
        elif ch == "\\":
            out.append("\\\\")
        elif ch == "\t":
            out.append("\\t")
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\f":
            out.append("\\f")
        elif ch in "=:#!":
            out.append("\\" + ch)
        elif ord(ch) < 0x20 or ord(ch) > 0x7E:
            # Characters outside the BMP are written as surrogate pairs
            units = ch.encode("utf-16-be")
            for j in range(0, len(units), 2):
                out.append("\\u%04X" % int.from_bytes(units[j:j + 2], "big"))
        else:
            out.append(ch)
    return "".join(out)


def render_properties(project: ProjectDescription) -> bytes:
    """Serialize the project's coordinates as ``pom.properties`` content.

    Keys are written in the order ``version``, ``groupId``, ``artifactId``
    under a ``#Leiningen`` header comment. No timestamp comment is written,
    so the output depends only on the project.
    """
    entries = [
        ("version", project.version),
        ("groupId", project.group),
        ("artifactId", project.name),
    ]
    lines = [f"#{PROPERTIES_HEADER}"]
    for key, value in entries:
        lines.append(f"{_escape_property(key, True)}={_escape_property(value or '', False)}")
    return ("\n".join(lines) + "\n").encode("iso-8859-1")
