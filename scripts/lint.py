#!/usr/bin/env python3
"""
Run pylint over ghvars using the settings in pyproject.toml.

Usage:
    python scripts/lint.py [PATH ...] [--errors-only] [-- PYLINT_ARGS ...]

With no paths, the ghvars package and the tests are linted.
"""

import argparse
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_TARGETS = ["ghvars", "tests"]


def build_command(targets: list[str], errors_only: bool, extra: list[str]) -> list[str]:
    cmd = [sys.executable, "-m", "pylint", f"--rcfile={PROJECT_ROOT / 'pyproject.toml'}"]
    if errors_only:
        cmd.append("--errors-only")
    return cmd + extra + targets


def main() -> int:
    parser = argparse.ArgumentParser(description="Lint the ghvars project")
    parser.add_argument("paths", nargs="*", help="Files or packages to lint")
    parser.add_argument("--errors-only", action="store_true", help="Report errors only")
    args, extra = parser.parse_known_args()
    extra = [arg for arg in extra if arg != "--"]

    targets = args.paths or DEFAULT_TARGETS
    missing = [target for target in targets if not (PROJECT_ROOT / target).exists()]
    if missing:
        print(f"Error: {', '.join(missing)} not found under {PROJECT_ROOT}", file=sys.stderr)
        return 1

    try:
        return subprocess.run(
            build_command(targets, args.errors_only, extra), cwd=PROJECT_ROOT, check=False
        ).returncode
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
