"""CLI entry point and file I/O.

Wires together project loading, model building, and serialization to write
``pom.xml`` (and optionally ``pom.properties``) for a project.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .pom_builder import ProjectDescriptionError, build_model
from .pom_models import ProjectDescription
from .pom_writer import render_descriptor, render_properties
from .project_loader import load_project


def pom(project: ProjectDescription, pom_location: Optional[str] = None, silently: bool = False) -> str:
    """Write ``pom.xml`` for a project, disclaimer included.

    Args:
        project: The project to describe.
        pom_location: Path relative to the project root (or absolute) to
            write to. Defaults to ``pom.xml`` in the project root.
        silently: If ``True``, don't print the ``Wrote ...`` line.

    Returns:
        The absolute path of the written file.
    """
    pom_file = Path(project.root) / (pom_location or "pom.xml")
    _write(pom_file, render_descriptor(build_model(project), with_disclaimer=True))
    if not silently:
        print(f"Wrote {pom_file.name}")
    return str(pom_file.absolute())


def pom_properties_path(project: ProjectDescription, target_dir: Path) -> Path:
    """Standard Maven metadata location for a project's ``pom.properties``."""
    return Path(target_dir) / "META-INF" / "maven" / project.group / project.name / "pom.properties"


def write_pom_properties(project: ProjectDescription, target_dir: Path) -> Path:
    """Write ``META-INF/maven/<group>/<name>/pom.properties`` under target_dir."""
    path = pom_properties_path(project, target_dir)
    _write(path, render_properties(project))
    return path


def _write(path: Path, content: bytes):
    """Write content to a file, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a Maven pom.xml from a project description"
    )
    parser.add_argument("project_file", type=Path, help="Path to the JSON project description")
    parser.add_argument("--output", "-o", default=None,
                        help="pom.xml location relative to the project root (default: pom.xml)")
    parser.add_argument("--properties", "-p", type=Path, default=None, metavar="DIR",
                        help="Also write META-INF/maven/<group>/<name>/pom.properties under DIR")
    parser.add_argument("--dry-run", "-n", action="store_true", help="Print output without writing files")
    parser.add_argument("--quiet", "-q", action="store_true", help="Don't report written files")
    return parser.parse_args(argv)


def main(argv=None):
    """CLI entry point. Loads the project file and writes the POM."""
    args = parse_args(argv)
    if not args.project_file.exists():
        print(f"ERROR: No project file found at {args.project_file}", file=sys.stderr)
        sys.exit(1)

    try:
        project = load_project(args.project_file)
        if args.dry_run:
            print("=" * 60)
            print(args.output or "pom.xml")
            print("=" * 60)
            print(render_descriptor(build_model(project), with_disclaimer=True).decode("utf-8"))
            if args.properties is not None:
                print("=" * 60)
                print(pom_properties_path(project, args.properties))
                print("=" * 60)
                print(render_properties(project).decode("iso-8859-1"))
            return

        pom(project, args.output, silently=args.quiet)
        if args.properties is not None:
            path = write_pom_properties(project, args.properties)
            if not args.quiet:
                print(f"Wrote {path}")
    except ProjectDescriptionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
