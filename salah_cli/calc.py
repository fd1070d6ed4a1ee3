import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from adhanpy.PrayerTimes import PrayerTimes

from .errors import CalculationError
from .methods import PRAYER_ORDER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float

    @classmethod
    def create(cls, lat, lng):
        if not -90 <= lat <= 90:
            raise CalculationError(f"failed to initialise coordinates: latitude {lat} out of range")
        if not -180 <= lng <= 180:
            raise CalculationError(f"failed to initialise coordinates: longitude {lng} out of range")
        return cls(lat=lat, lng=lng)


@dataclass(frozen=True)
class DayTimes:
    """One day's prayer times, as aware datetimes in the local timezone."""

    day: date
    fajr: datetime
    sunrise: datetime
    dhuhr: datetime
    asr: datetime
    maghrib: datetime
    isha: datetime

    def items(self):
        return [(name, self.time_for(name)) for name in PRAYER_ORDER]

    def time_for(self, name):
        return getattr(self, name.lower())

    def current_prayer(self, now):
        """Name of the last event at or before now, or None before Fajr."""
        current = None
        for name, at in self.items():
            if at <= now:
                current = name
        return current

    def next_prayer(self, now):
        """Name of the first event strictly after now, or None after Isha."""
        for name, at in self.items():
            if at > now:
                return name
        return None


def local_now():
    return datetime.now().astimezone()


def _localise(value, tz):
    # adhanpy reports UTC when no time zone is passed
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(tz)


def prayer_times_for_date(config, params, day, tz):
    coords = Coordinates.create(config.latitude, config.longitude)
    try:
        times = PrayerTimes(
            (coords.lat, coords.lng),
            datetime(day.year, day.month, day.day),
            calculation_parameters=params,
        )
    except RuntimeError as exc:
        # adhanpy raises this when the sun never rises or sets that day
        raise CalculationError(
            f"no sunrise/sunset at ({coords.lat}, {coords.lng}) on {day}: {exc}"
        ) from exc
    except (ArithmeticError, TypeError, ValueError) as exc:
        raise CalculationError(f"failed to calculate prayer times for {day}: {exc}") from exc

    day_times = DayTimes(
        day=day,
        fajr=_localise(times.fajr, tz),
        sunrise=_localise(times.sunrise, tz),
        dhuhr=_localise(times.dhuhr, tz),
        asr=_localise(times.asr, tz),
        maghrib=_localise(times.maghrib, tz),
        isha=_localise(times.isha, tz),
    )
    logger.debug("Prayer times for %s at (%s, %s): %s", day, coords.lat, coords.lng, day_times)
    return day_times


def todays_prayer_times(config, params, now):
    return prayer_times_for_date(config, params, now.date(), now.tzinfo)


def tomorrows_prayer_times(config, params, now):
    return prayer_times_for_date(config, params, now.date() + timedelta(days=1), now.tzinfo)


def next_prayer_info(today, tomorrow, now):
    """Return (name, time) of the next prayer, rolling over to tomorrow's Fajr after Isha."""
    if now < today.isha:
        name = today.next_prayer(now)
        if name is None:
            raise CalculationError("no upcoming prayer found for today")
        return name, today.time_for(name)
    return "Fajr", tomorrow.fajr
