from __future__ import annotations

import logging
import runpy
from pathlib import Path
from typing import Any, Dict

from .errors import BootstrapError

BOOTSTRAP_FILE = "web-bootstrap.py"

_LOG = logging.getLogger(__name__)


def default_script_dir() -> Path:
    """Directory of the scenario module itself."""
    return Path(__file__).resolve().parent


def bootstrap_path(script_dir: Path | None = None) -> Path:
    """<script_dir>/web-bootstrap.py"""
    base = script_dir if script_dir is not None else default_script_dir()
    return base / BOOTSTRAP_FILE


def include(path: Path) -> Dict[str, Any]:
    """
    Execute the bootstrap file and return its resulting globals.

    A missing file is fatal (BootstrapError). Anything the bootstrap code
    itself raises propagates unchanged.
    """
    if not path.is_file():
        raise BootstrapError(f"Bootstrap file not found: {path}")
    _LOG.info("including bootstrap %s", path)
    return runpy.run_path(str(path), run_name="__bootstrap__")


__all__ = ["BOOTSTRAP_FILE", "bootstrap_path", "default_script_dir", "include"]
