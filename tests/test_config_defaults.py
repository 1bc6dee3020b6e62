from pathlib import Path

from table2dsv.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.source.file_base == "cwd"
    assert cfg.source.base_dir is None
    assert cfg.source.base_dir_env == "TABLE2DSV_BASE_DIR"
    assert cfg.render.browser == "chromium"
    assert cfg.render.headless is True
    assert cfg.render.wait_until == "networkidle"
    assert cfg.render.timeout_ms is None
    assert cfg.render.row_selector == "table tr"
    assert cfg.output.delimiter is None
    assert cfg.output.encoding == "utf-8"
    assert cfg.logging.level == "WARNING"


def test_user_yaml_overrides(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text(
        'render:\n  browser: firefox\n  timeout_ms: 10000\noutput:\n  delimiter: ","\n'
    )
    cfg = load_config(cfg_file, env={})
    assert cfg.render.browser == "firefox"
    assert cfg.render.timeout_ms == 10000
    assert cfg.render.wait_until == "networkidle"
    assert cfg.output.delimiter == ","


def test_empty_yaml_keeps_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "empty.yml"
    cfg_file.write_text("")
    assert load_config(cfg_file, env={}) == load_config(env={})
