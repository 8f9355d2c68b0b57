"""Checks that the host is ready for mirroring."""

from __future__ import annotations

import os
import subprocess
import sys

from .config import Config


class PrecheckError(RuntimeError):
    """The system is not ready for mirroring."""


def has_git() -> bool:
    """Return True if ``git`` can be run from the PATH."""
    try:
        result = subprocess.run(
            ["git", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        ok = False
    else:
        ok = result.returncode == 0
    if not ok:
        print("Error: git is not installed or not found in PATH", file=sys.stderr)
    return ok


def git_base_exists(path: str) -> bool:
    """Return True if ``path`` is an existing directory."""
    if os.path.isdir(path):
        return True
    print(f"Error: git base directory does not exist: {path}", file=sys.stderr)
    return False


def precheck_self(config: Config) -> None:
    """Raise PrecheckError unless git is available and the git base exists."""
    if not has_git():
        raise PrecheckError("git is not installed or not found in PATH")
    if not git_base_exists(config.git_base):
        raise PrecheckError(f"git base directory does not exist: {config.git_base}")