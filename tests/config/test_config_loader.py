"""Tests for loading configuration files."""

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError
from festreceipt.config.loader import load_config


def _write(path: Path, text: str) -> Path:
    path.write_text(dedent(text), encoding="utf-8")
    return path


class TestLoadConfig:
    """Tests for load_config."""

    def test_full_config(self, tmp_path):
        """Sections load and relative paths resolve next to the config."""
        (tmp_path / "data").mkdir()
        (tmp_path / "data" / "donations.csv").write_text("id,amount\n1,100\n")
        config_file = _write(
            tmp_path / "config.toml",
            """\
            [organization]
            name = "Yuva Mandali"

            [receipt]
            sub_title = "Vinayaka Chavithi 2026"
            layout = "table"
            theme = "green"
            show_date = false

            [receipt.upi]
            upi-id = "mandali@upi"

            [input]
            path = "data/donations.csv"

            [output]
            path = "out"
            """,
        )

        config = load_config(config_file)

        assert config.organization.name == "Yuva Mandali"
        assert config.receipt.layout == "table"
        assert config.receipt.show_date is False
        assert config.receipt.upi is not None
        assert config.receipt.upi.upi_id == "mandali@upi"
        assert config.input is not None
        assert config.input.path.resolve() == (
            tmp_path / "data" / "donations.csv"
        ).resolve()
        assert Path(config.output.path) == tmp_path.resolve() / "out"

    def test_absolute_output_path_is_kept(self, tmp_path):
        """Absolute output directories are used as given."""
        out = tmp_path / "elsewhere"
        config_file = _write(
            tmp_path / "config.toml",
            f"""\
            [output]
            path = "{out.as_posix()}"
            """,
        )
        assert load_config(config_file).output.path == out.as_posix()

    def test_default_output_path(self, tmp_path):
        """Without an output section receipts go to ./receipts."""
        config_file = _write(tmp_path / "config.toml", "")
        assert load_config(config_file).output.path == "receipts"

    def test_missing_file(self, tmp_path):
        """A missing config file is re-raised."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_invalid_input_path(self, tmp_path, caplog):
        """A donations path that does not exist fails validation."""
        config_file = _write(
            tmp_path / "config.toml",
            """\
            [input]
            path = "nowhere.xlsx"
            """,
        )
        with pytest.raises(ValidationError):
            load_config(config_file)
        assert "input.path" in caplog.text

    def test_invalid_toml(self, tmp_path):
        """Broken TOML is re-raised."""
        config_file = _write(tmp_path / "config.toml", "[receipt\n")
        with pytest.raises(Exception) as exc_info:
            load_config(config_file)
        assert type(exc_info.value).__name__ == "TOMLDecodeError"
