import json
from datetime import datetime, timezone

import pytest

from salah_cli import cli
from salah_cli.config import Config, load_config
from salah_cli.wizard import setup_config

AFTER_ISHA = datetime(2025, 8, 23, 23, 0, tzinfo=timezone.utc)


def fixed_clock():
    return AFTER_ISHA


@pytest.fixture
def london_file(write_config):
    return write_config({"latitude": 51.5, "longitude": -0.12, "enable_countdown": True})


@pytest.mark.parametrize("argv", [[], ["help"], ["--help"], ["-h"]])
def test_usage_exits_zero(argv, capsys):
    assert cli.main(argv) == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["tomorrow"], ["--bogus"], ["today", "extra"]])
def test_unknown_command_exits_one(argv, capsys):
    assert cli.main(argv) == 1
    out = capsys.readouterr().out
    assert "Unknown command" in out
    assert "Usage:" in out


def test_today(london_file, capsys):
    assert cli.main(["today", "--config", london_file], clock=fixed_clock) == 0

    out = capsys.readouterr().out.strip()
    names = [part.split()[0] for part in out.split(" | ")]
    assert names == ["Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha"]


def test_next_after_isha_is_fajr(london_file, capsys):
    assert cli.main(["next", "--config", london_file], clock=fixed_clock) == 0

    out = capsys.readouterr().out
    assert out.startswith("Fajr ")
    assert "(in " in out


def test_today_without_config_fails(config_dir, capsys):
    missing = str(config_dir / "config.json")

    assert cli.main(["today", "--config", missing], clock=fixed_clock) == 1
    assert capsys.readouterr().err.startswith("Error: unable to open config file")


def test_next_with_unsupported_code_fails(write_config, capsys):
    path = write_config({"latitude": 51.5, "longitude": -0.12, "method": 42})

    assert cli.main(["next", "--config", path], clock=fixed_clock) == 1
    assert "unsupported calculation method code: 42" in capsys.readouterr().err


def test_validate_config_ok(london_file, capsys):
    assert cli.main(["validate-config", "--config", london_file]) == 0
    assert "Config is valid!" in capsys.readouterr().out


def test_validate_config_invalid(write_config, capsys):
    path = write_config({"latitude": 123, "longitude": 0})

    assert cli.main(["validate-config", "--config", path]) == 1
    assert "Invalid config" in capsys.readouterr().out


def test_validate_config_unknown_key(write_config, capsys):
    path = write_config({"latitude": 1, "longitude": 0, "city": "Leeds"})

    assert cli.main(["validate-config", "--config", path]) == 1
    assert "Failed to load config" in capsys.readouterr().out


def test_setup_writes_config(config_dir, monkeypatch, capsys):
    path = str(config_dir / "config.json")
    created = Config(latitude=24.47, longitude=54.37, method=5, madhab=0)
    monkeypatch.setattr(cli, "setup_config", lambda: created)

    assert cli.main(["setup", "--config", path]) == 0

    assert f"Successfully written config file to {path}" in capsys.readouterr().out
    assert load_config(path) == created
    assert json.loads(open(path, encoding="utf-8").read())["method"] == 5


def test_setup_uses_default_path(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setattr(cli, "setup_config", lambda: Config(latitude=1, longitude=2))

    assert cli.main(["setup"]) == 0
    assert (tmp_path / "salah-cli" / "config.json").is_file()


def test_methods_lists_codes(capsys):
    assert cli.main(["methods"]) == 0

    out = capsys.readouterr().out
    assert "  6: Moon Sighting Committee" in out
    assert "  1: Hanafi" in out
    assert "  2: Twilight angle" in out


def test_setup_with_other_method_then_today(config_dir, monkeypatch, capsys):
    path = str(config_dir / "config.json")
    answers = iter(["51.5", "-0.12", "", "1", "", ""])
    monkeypatch.setattr(
        cli, "setup_config", lambda: setup_config(ask=lambda prompt: next(answers), out=lambda line: None)
    )

    assert cli.main(["setup", "--config", path]) == 0
    assert load_config(path).method == 0

    assert cli.main(["today", "--config", path], clock=fixed_clock) == 0
    assert "Fajr " in capsys.readouterr().out


MIDSUMMER = datetime(2025, 6, 21, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("command", ["today", "next"])
@pytest.mark.parametrize("latitude", [80.0, -89.9])
def test_polar_locations_report_error(write_config, capsys, command, latitude):
    path = write_config({"latitude": latitude, "longitude": 10.0})

    assert cli.main([command, "--config", path], clock=lambda: MIDSUMMER) == 1
    assert capsys.readouterr().err.startswith("Error: no sunrise/sunset")
