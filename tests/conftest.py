import json
from datetime import date, datetime, timezone

import pytest

from salah_cli.calc import DayTimes
from salah_cli.config import Config

UTC = timezone.utc


def _make_day(day=date(2025, 8, 27), **overrides):
    def at(hour, minute):
        return datetime(day.year, day.month, day.day, hour, minute, tzinfo=UTC)

    times = {
        "fajr": at(4, 30),
        "sunrise": at(6, 0),
        "dhuhr": at(13, 0),
        "asr": at(16, 30),
        "maghrib": at(19, 45),
        "isha": at(21, 15),
    }
    times.update(overrides)
    return DayTimes(day=day, **times)


@pytest.fixture
def make_day():
    return _make_day


@pytest.fixture
def london():
    return Config(latitude=51.5, longitude=-0.12)


@pytest.fixture
def config_dir(tmp_path):
    return tmp_path / "salah-cli"


@pytest.fixture
def write_config(config_dir):
    def _write(data):
        config_dir.mkdir(parents=True, exist_ok=True)
        path = config_dir / "config.json"
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write
