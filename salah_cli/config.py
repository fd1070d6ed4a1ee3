import contextlib
import json
import logging
import os
import sys
import tempfile
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ConfigDecodeError, ConfigIOError, ConfigPathError, ConfigValidationError
from .methods import ANSI_COLOURS

logger = logging.getLogger(__name__)

APP_NAME = "salah-cli"
CONFIG_FILE_NAME = "config.json"
UNIX_CONFIG_DIR = ".config"


class PrayerOffsets(BaseModel):
    """Per-prayer minute offsets, applied by adhanpy after the base calculation."""

    model_config = ConfigDict(extra="forbid")

    fajr: int = 0
    sunrise: int = 0
    dhuhr: int = 0
    asr: int = 0
    maghrib: int = 0
    isha: int = 0


class Config(BaseModel):
    """User settings as stored in config.json.

    Calculation fields left as None keep the calculation method's defaults.
    """

    model_config = ConfigDict(extra="forbid")

    latitude: float
    longitude: float

    method: Optional[int] = None
    fajr_angle: Optional[float] = None
    isha_angle: Optional[float] = None
    isha_interval: Optional[int] = None
    madhab: Optional[int] = None
    high_latitude_rule: Optional[int] = None
    adjustments: Optional[PrayerOffsets] = None
    method_adjustments: Optional[PrayerOffsets] = None

    enable_countdown: bool = False
    enable_highlighting: bool = False
    highlight_colour: str = ""


def get_config_path(platform=None, getenv=None):
    if platform is None:
        platform = sys.platform
    if getenv is None:
        getenv = os.environ.get

    if platform in ("win32", "cygwin"):
        app_data = getenv("APPDATA")
        if not app_data:
            user_profile = getenv("USERPROFILE")
            if not user_profile:
                raise ConfigPathError("APPDATA and USERPROFILE not set")
            app_data = os.path.join(user_profile, "AppData", "Roaming")
        return os.path.join(app_data, APP_NAME, CONFIG_FILE_NAME)

    if platform.startswith(("linux", "freebsd", "openbsd", "netbsd")) or platform == "darwin":
        config_home = getenv("XDG_CONFIG_HOME")
        if not config_home:
            home = getenv("HOME")
            if not home:
                raise ConfigPathError("HOME not set")
            config_home = os.path.join(home, UNIX_CONFIG_DIR)
        return os.path.join(config_home, APP_NAME, CONFIG_FILE_NAME)

    raise ConfigPathError(f"unsupported OS: {platform}")


def validate_latitude(latitude):
    if not -90 <= latitude <= 90:
        raise ConfigValidationError(f"latitude must be between -90 and 90 (got {latitude:f})")


def validate_longitude(longitude):
    if not -180 <= longitude <= 180:
        raise ConfigValidationError(f"longitude must be between -180 and 180 (got {longitude:f})")


def validate_config(config):
    validate_latitude(config.latitude)
    validate_longitude(config.longitude)

    if config.enable_highlighting and config.highlight_colour:
        if config.highlight_colour not in ANSI_COLOURS:
            allowed = ", ".join(sorted(ANSI_COLOURS))
            raise ConfigValidationError(
                f"invalid highlight colour '{config.highlight_colour}'. Allowed: {allowed}"
            )

    if config.isha_angle is not None and config.isha_interval is not None:
        raise ConfigValidationError("only one of isha_angle or isha_interval can be set")


def _describe(exc):
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        problems.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(problems)


def load_config(path):
    directory = os.path.dirname(path)
    if directory and not os.path.isdir(directory):
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as exc:
            raise ConfigIOError(f"failed to create config directory {directory}: {exc}") from exc

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except OSError as exc:
        raise ConfigIOError(f"unable to open config file {path}: {exc}") from exc

    try:
        config = Config.model_validate_json(raw)
    except ValidationError as exc:
        raise ConfigDecodeError(f"error decoding JSON from {path}: {_describe(exc)}") from exc

    try:
        validate_config(config)
    except ConfigValidationError as exc:
        raise ConfigValidationError(f"invalid config in {path}: {exc}") from exc

    logger.debug("Loaded config from %s", path)
    return config


def load(path=None, platform=None, getenv=None):
    if path is None:
        path = get_config_path(platform, getenv)
    logger.debug("Using config file: %s", path)
    return load_config(path)


def _remove_quietly(path):
    with contextlib.suppress(OSError):
        os.remove(path)


def _atomic_rename(tmp_path, target_path):
    try:
        os.rename(tmp_path, target_path)
        return
    except OSError as exc:
        primary = exc

    # Some platforms refuse to rename onto an existing file
    logger.debug("Rename onto %s failed (%s); removing target and retrying", target_path, primary)
    try:
        os.remove(target_path)
    except OSError:
        _remove_quietly(tmp_path)
        raise ConfigIOError(f"failed to rename temp config file: {primary}") from primary

    try:
        os.rename(tmp_path, target_path)
    except OSError as exc:
        _remove_quietly(tmp_path)
        raise ConfigIOError(f"failed to rename temp config file: {exc}") from exc


def save_config(config, path):
    """Write config to path through a synced temp file and a rename.

    The target is either left untouched or fully replaced.
    """
    directory = os.path.dirname(path) or "."
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as exc:
        raise ConfigIOError(f"failed to create config directory {directory}: {exc}") from exc

    payload = config.model_dump(mode="json", exclude_none=True)

    try:
        fd, tmp_path = tempfile.mkstemp(prefix=f"{CONFIG_FILE_NAME}.tmp.", dir=directory)
    except OSError as exc:
        raise ConfigIOError(f"failed to create temp file: {exc}") from exc

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
    except (OSError, TypeError, ValueError) as exc:
        _remove_quietly(tmp_path)
        raise ConfigIOError(f"failed to write temp config file: {exc}") from exc

    _atomic_rename(tmp_path, path)
    logger.debug("Saved config to %s", path)
