"""
Shared test infrastructure for the smoke script.

Modules:
- file_utils: Utilities for creating files and directories
- cli_utils: Running the CLI in a subprocess and parsing its JSON output
- expected: Reference output of a plain scenario run
"""

from .file_utils import write, write_yaml
from .cli_utils import run_cli, jload
from .expected import EXPECTED_PLAIN

__all__ = [
    # File utilities
    "write", "write_yaml",

    # CLI utilities
    "run_cli", "jload",

    # Reference output
    "EXPECTED_PLAIN",
]
