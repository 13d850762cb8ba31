from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError
from .types import RunOptions

SCHEMA_VERSION = 1
DEFAULT_CFG_FILE = "smoke.yaml"

# --------------------------------------------------------------------------- #
# DEFAULTS
# --------------------------------------------------------------------------- #
_DEFAULT_CFG: Dict[str, Any] = {
    "schema_version": SCHEMA_VERSION,
    "include": False,
    "dump": False,
    "script_dir": None,
}

# --------------------------------------------------------------------------- #
# YAML loader
# --------------------------------------------------------------------------- #
_yaml = YAML(typ="safe")


class _ConfigFile(BaseModel):
    """Value types accepted in smoke.yaml; unknown keys pass through."""
    model_config = ConfigDict(extra="allow")

    schema_version: StrictInt = SCHEMA_VERSION
    include: StrictBool = False
    dump: StrictBool = False
    script_dir: Optional[StrictStr] = None


# --------------------------------------------------------------------------- #
# HELPERS
# --------------------------------------------------------------------------- #
def _merge_defaults(raw: Dict[str, Any]) -> Dict[str, Any]:
    """User values on top of the defaults."""
    cfg = _DEFAULT_CFG.copy()
    cfg.update(raw)
    return cfg


def config_path(root: Path, explicit: Optional[Path] = None) -> Path:
    """Path to the config file: explicit --config or ./smoke.yaml."""
    if explicit is not None:
        return explicit.resolve()
    return (root / DEFAULT_CFG_FILE).resolve()


# --------------------------------------------------------------------------- #
# PUBLIC API
# --------------------------------------------------------------------------- #
def load_config(path: Path) -> Dict[str, Any]:
    """
    Load smoke.yaml.

    • Missing file → defaults.
    • Missing schema_version → current version is assumed.
    • include/dump must be booleans, script_dir a string.
    • Relative script_dir is resolved against the config file's directory.
    """
    if not path.exists():
        return _DEFAULT_CFG.copy()
    if not path.is_file():
        raise ConfigError(f"{path}: not a regular file")

    try:
        with path.open(encoding="utf-8") as f:
            raw = _yaml.load(f) or {}
    except YAMLError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top-level document must be a mapping")

    if raw.get("schema_version", SCHEMA_VERSION) != SCHEMA_VERSION:
        raise ConfigError(
            f"Unsupported config schema {raw.get('schema_version')} "
            f"(tool expects {SCHEMA_VERSION})"
        )

    try:
        _ConfigFile.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"])
        raise ConfigError(f"{path}: {key}: {first['msg']}") from e

    cfg = _merge_defaults(raw)
    if cfg["script_dir"] is not None:
        cfg["script_dir"] = (path.parent / str(cfg["script_dir"])).resolve()
    return cfg


def build_options(
    cfg: Dict[str, Any],
    *,
    include: bool = False,
    dump: bool = False,
    script_dir: Optional[Path] = None,
) -> RunOptions:
    """
    Combine the loaded config with CLI switches.
    A switch given on the command line always wins; switches can only turn flags on.
    """
    return RunOptions(
        run_bootstrap=include or bool(cfg.get("include")),
        dump_environment=dump or bool(cfg.get("dump")),
        script_dir=script_dir.resolve() if script_dir is not None else cfg.get("script_dir"),
    )


__all__ = ["load_config", "build_options", "config_path", "SCHEMA_VERSION", "DEFAULT_CFG_FILE"]
