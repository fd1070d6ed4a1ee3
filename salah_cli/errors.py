class SalahError(Exception):
    """Base class for every failure the CLI reports to the user."""


class ConfigError(SalahError):
    pass


class ConfigPathError(ConfigError):
    pass


class ConfigIOError(ConfigError):
    pass


class ConfigDecodeError(ConfigError):
    pass


class ConfigValidationError(ConfigError):
    pass


class CalculationError(SalahError):
    pass


class SetupAborted(SalahError):
    pass
