"""Load a ProjectDescription from a JSON project file.

Expected shape::

    {
      "name": "proj",
      "version": "1.0.0",
      "group": "org.example",
      "description": "...",
      "dependencies": [["org.clojure/clojure", "1.2.0"]],
      "repositories": {"snapshots": "http://example.org/repo"},
      "root": "."
    }

``group`` defaults to ``name``; ``root`` defaults to the file's directory and
is resolved relative to it.
"""

import json
from pathlib import Path

from .pom_builder import ProjectDescriptionError
from .pom_models import ProjectDescription


def _pairs(value, field_name: str) -> tuple:
    """Normalize an object or a list of 2-item lists into a tuple of string pairs."""
    if value is None:
        return ()
    if isinstance(value, dict):
        items = list(value.items())
    elif isinstance(value, list):
        items = value
    else:
        raise ProjectDescriptionError(f"'{field_name}' must be a list of pairs or an object")
    pairs = []
    for item in items:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise ProjectDescriptionError(f"malformed entry in '{field_name}': {item!r}")
        if not all(isinstance(part, str) for part in item):
            raise ProjectDescriptionError(f"entries in '{field_name}' must be strings: {item!r}")
        pairs.append((item[0], item[1]))
    return tuple(pairs)


def _string(data: dict, key: str, path: Path, required: bool = False):
    value = data.get(key)
    if value is None and not required:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ProjectDescriptionError(f"{path}: field '{key}' must be a non-empty string")
    return value


def load_project(path: Path) -> ProjectDescription:
    """Read and validate a JSON project file.

    Args:
        path: Path to the JSON project description.

    Returns:
        A ProjectDescription.

    Raises:
        ProjectDescriptionError: If the file is not a JSON object, a string
            field is missing or has the wrong type, or a list field is malformed.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ProjectDescriptionError(f"{path}: invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise ProjectDescriptionError(f"{path}: project description must be a JSON object")

    name = _string(data, "name", path, required=True)
    version = _string(data, "version", path, required=True)
    group = _string(data, "group", path) or name
    if data.get("description") is not None and not isinstance(data["description"], str):
        raise ProjectDescriptionError(f"{path}: field 'description' must be a string")
    root = _string(data, "root", path, required="root" in data) or "."

    return ProjectDescription(
        name=name,
        version=version,
        group=group,
        description=data.get("description"),
        dependencies=_pairs(data.get("dependencies"), "dependencies"),
        repositories=_pairs(data.get("repositories"), "repositories"),
        root=(path.parent / root).resolve(),
    )
