from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class RunOptions:
    """
    Explicit switches for one scenario run.

    Replaces the ambient `include` / `dump` flags: the entry routine reads
    nothing from globals or the environment.
    """
    run_bootstrap: bool = False      # include <script_dir>/web-bootstrap.py first
    dump_environment: bool = False   # dump server/environment info at the end
    # Directory the bootstrap file is looked up in; None means the package dir
    script_dir: Optional[Path] = None
