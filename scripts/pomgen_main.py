#!/usr/bin/env python3
"""Generate a Maven pom.xml from a JSON project description.

Usage:
    python pomgen_main.py <project.json> [--output <pom-location>] [--properties <dir>] [--dry-run]

If --output is omitted, pom.xml is written to the project root.
If --dry-run is given, outputs are printed to stdout instead of written.
"""

from pomgen.cli import main

if __name__ == "__main__":
    main()
