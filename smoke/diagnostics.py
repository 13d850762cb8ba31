from __future__ import annotations

import platform
import sys
from pathlib import Path
from typing import Optional

from .bootstrap import bootstrap_path
from .config import build_options, config_path, load_config
from .diag_report_schema import (
    DiagBootstrap, DiagCheck, DiagConfig, DiagEnv, DiagReport, Severity,
)
from .version import tool_version


def run_diag(*, config: Optional[Path] = None) -> DiagReport:
    """
    Build the diagnostics report. Never raises: config problems end up
    in `config.error` and in an `error` check.
    """
    root = Path.cwd().resolve()

    env = DiagEnv(
        python=f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        platform=f"{platform.system()} {platform.release()} ({platform.machine()})",
        cwd=str(root),
    )

    checks: list[DiagCheck] = []
    def _mk(name: str, level: Severity, details: str = "") -> None:
        checks.append(DiagCheck(name=name, level=level, details=details))

    cfg_file = config_path(root, config)
    cfg_block = DiagConfig(path=str(cfg_file), exists=cfg_file.is_file())
    try:
        opts = build_options(load_config(cfg_file))
        cfg_block.include = opts.run_bootstrap
        cfg_block.dump = opts.dump_environment
        cfg_block.scriptDir = str(opts.script_dir) if opts.script_dir is not None else None
        _mk("config.load", Severity.ok, str(cfg_file) if cfg_block.exists else "defaults")
    except Exception as e:
        # ConfigError or anything unexpected from the filesystem
        opts = build_options({})
        cfg_block.error = str(e)
        _mk("config.load", Severity.error, str(e))

    boot = bootstrap_path(opts.script_dir)
    boot_block = DiagBootstrap(path=str(boot), exists=boot.is_file())
    if boot_block.exists:
        _mk("bootstrap.file", Severity.ok, str(boot))
    else:
        # only a problem when the config actually asks for it
        _mk("bootstrap.file", Severity.error if opts.run_bootstrap else Severity.warn,
            f"not found: {boot}")

    return DiagReport(
        tool_version=tool_version(),
        env=env,
        config=cfg_block,
        bootstrap=boot_block,
        checks=checks,
    )


__all__ = ["run_diag"]
