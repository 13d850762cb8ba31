from __future__ import annotations

import logging
import os

LOGGER_NAME = "smoke"
DEBUG_ENV = "SMOKE_DEBUG"


def setup_logging() -> logging.Logger:
    """
    Configure the package logger once per process.

    Handlers go to stderr so the scenario output on stdout stays byte-exact.
    """
    log = logging.getLogger(LOGGER_NAME)
    if getattr(setup_logging, "_inited", False):
        return log
    setup_logging._inited = True  # type: ignore[attr-defined]
    level = logging.DEBUG if os.environ.get(DEBUG_ENV) else logging.INFO
    log.setLevel(level)
    if not log.handlers:
        h = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        h.setFormatter(fmt)
        log.addHandler(h)
    return log


__all__ = ["setup_logging", "LOGGER_NAME", "DEBUG_ENV"]
