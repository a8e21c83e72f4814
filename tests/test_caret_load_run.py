from __future__ import annotations

from pathlib import Path

import pytest

import caret_load_run


def _write_config(tmp_path: Path, model_path: Path) -> Path:
    config_path = tmp_path / "model.yaml"
    config_path.write_text(
        "loader: {key: r.caret}\n"
        f"model: {{path: '{model_path}'}}\n"
        "schema:\n"
        "  fields:\n"
        "    - {name: amount, type: numeric}\n"
        "    - {name: country, type: categorical, levels: [US, FR]}\n",
        encoding="utf-8",
    )
    return config_path


def test_cli_validates_model(tmp_path: Path, capsys) -> None:
    model_file = tmp_path / "fraud.rds"
    model_file.write_bytes(b"RDS")

    exit_code = caret_load_run.main([str(_write_config(tmp_path, model_file))])

    assert exit_code == 0
    assert "ok" in capsys.readouterr().out


def test_cli_prints_validation_errors(tmp_path: Path, capsys) -> None:
    exit_code = caret_load_run.main([str(_write_config(tmp_path, tmp_path / "missing"))])

    assert exit_code == 1
    assert "model_path: Model path does not exist" in capsys.readouterr().out


def test_cli_accepts_lowercase_log_level() -> None:
    args = caret_load_run.parse_args(["model.yaml", "--log-level", "debug"])

    assert args.log_level == "DEBUG"


def test_cli_rejects_unknown_log_level(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        caret_load_run.parse_args(["model.yaml", "--log-level", "chatty"])

    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
