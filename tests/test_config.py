from pathlib import Path

import pytest

from smoke.config import SCHEMA_VERSION, build_options, config_path, load_config
from smoke.errors import ConfigError
from smoke.types import RunOptions
from tests.infrastructure import write, write_yaml


def test_missing_file_gives_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "smoke.yaml")
    assert cfg == {"schema_version": SCHEMA_VERSION, "include": False, "dump": False, "script_dir": None}
    assert build_options(cfg) == RunOptions()


def test_flags_from_file(tmp_path: Path):
    p = write_yaml(tmp_path / "smoke.yaml", """
        include: true
        dump: true
        script_dir: boot
    """)
    opts = build_options(load_config(p))
    assert opts.run_bootstrap is True
    assert opts.dump_environment is True
    # relative to the config file, not the cwd
    assert opts.script_dir == (tmp_path / "boot").resolve()


def test_cli_switches_turn_flags_on(tmp_path: Path):
    opts = build_options(load_config(tmp_path / "absent.yaml"), include=True, dump=True, script_dir=tmp_path)
    assert opts == RunOptions(run_bootstrap=True, dump_environment=True, script_dir=tmp_path.resolve())


def test_cli_script_dir_wins_over_file(tmp_path: Path):
    p = write_yaml(tmp_path / "smoke.yaml", "script_dir: from-file\n")
    other = tmp_path / "from-cli"
    opts = build_options(load_config(p), script_dir=other)
    assert opts.script_dir == other.resolve()


def test_empty_file_gives_defaults(tmp_path: Path):
    p = write(tmp_path / "smoke.yaml", "")
    assert build_options(load_config(p)) == RunOptions()


def test_unsupported_schema(tmp_path: Path):
    p = write_yaml(tmp_path / "smoke.yaml", "schema_version: 99\n")
    with pytest.raises(ConfigError, match="Unsupported config schema 99"):
        load_config(p)


def test_non_mapping_document(tmp_path: Path):
    p = write_yaml(tmp_path / "smoke.yaml", "- include\n- dump\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(p)


def test_broken_yaml(tmp_path: Path):
    p = write(tmp_path / "smoke.yaml", "include: [unclosed\n")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(p)


def test_config_path_default_and_explicit(tmp_path: Path):
    assert config_path(tmp_path) == (tmp_path / "smoke.yaml").resolve()
    assert config_path(tmp_path, tmp_path / "other.yaml") == (tmp_path / "other.yaml").resolve()


@pytest.mark.parametrize("body, key", [
    ('include: "false"\n', "include"),
    ('dump: "no"\n', "dump"),
    ("include: 1\n", "include"),
    ("dump: null\n", "dump"),
    ("script_dir: 42\n", "script_dir"),
    ("script_dir: [a, b]\n", "script_dir"),
])
def test_wrong_value_types_are_rejected(tmp_path: Path, body: str, key: str):
    # a quoted "false" must never switch a flag on
    p = write(tmp_path / "smoke.yaml", body)
    with pytest.raises(ConfigError, match=key):
        load_config(p)


def test_unknown_keys_are_ignored(tmp_path: Path):
    p = write_yaml(tmp_path / "smoke.yaml", """
        include: false
        comment: anything
    """)
    assert build_options(load_config(p)) == RunOptions()


def test_config_path_is_a_directory(tmp_path: Path):
    (tmp_path / "smoke.yaml").mkdir()
    with pytest.raises(ConfigError, match="not a regular file"):
        load_config(tmp_path / "smoke.yaml")
