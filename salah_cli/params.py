import logging

from adhanpy.calculation.CalculationMethod import CalculationMethod
from adhanpy.calculation.CalculationParameters import CalculationParameters
from adhanpy.calculation.HighLatitudeRule import HighLatitudeRule
from adhanpy.calculation.Madhab import Madhab
from adhanpy.calculation.PrayerAdjustments import PrayerAdjustments

from .errors import CalculationError
from .methods import DEFAULT_METHOD, HIGH_LATITUDE_RULES, MADHABS, METHODS

logger = logging.getLogger(__name__)


def _member(enum_cls, table, code, kind):
    entry = table.get(code)
    member = getattr(enum_cls, entry[0], None) if entry else None
    if member is None:
        raise CalculationError(f"unsupported {kind} code: {code}")
    return member


def _adjustments(offsets):
    return PrayerAdjustments(
        fajr=offsets.fajr,
        sunrise=offsets.sunrise,
        dhuhr=offsets.dhuhr,
        asr=offsets.asr,
        maghrib=offsets.maghrib,
        isha=offsets.isha,
    )


def method_for(code):
    return _member(CalculationMethod, METHODS, code, "calculation method")


def build_calculation_params(config):
    """Start from the method's defaults and override only the fields set in config."""
    code = DEFAULT_METHOD if config.method is None else config.method
    params = CalculationParameters(method=method_for(code))

    if config.fajr_angle is not None:
        params.fajr_angle = config.fajr_angle
    if config.isha_angle is not None:
        params.isha_angle = config.isha_angle
    if config.isha_interval is not None:
        params.isha_interval = config.isha_interval
    if config.madhab is not None:
        params.madhab = _member(Madhab, MADHABS, config.madhab, "madhab")
    if config.high_latitude_rule is not None:
        params.high_latitude_rule = _member(
            HighLatitudeRule, HIGH_LATITUDE_RULES, config.high_latitude_rule, "high latitude rule"
        )
    if config.adjustments is not None:
        params.adjustments = _adjustments(config.adjustments)
    if config.method_adjustments is not None:
        params.method_adjustments = _adjustments(config.method_adjustments)

    logger.debug("Built calculation parameters for method %s", METHODS[code][1])
    return params
