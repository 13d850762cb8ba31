"""
Errors the CLI reports as a one-line message on stderr (exit code 2).

Anything not derived from SmokeUserError is treated as a bug and keeps
its traceback.
"""

from __future__ import annotations


class SmokeUserError(Exception):
    """Something the user can fix without touching the code."""
    pass


class BootstrapError(SmokeUserError):
    """`include` was requested but web-bootstrap.py is not there."""
    pass


class ConfigError(SmokeUserError):
    """smoke.yaml cannot be read, parsed or has values of the wrong type."""
    pass


__all__ = ["SmokeUserError", "BootstrapError", "ConfigError"]
