DEFAULT_METHOD = 6

# Config codes -> (adhanpy member name, label)
METHODS = {
    0: ("NONE", "Other"),
    1: ("MUSLIM_WORLD_LEAGUE", "Muslim World League"),
    2: ("EGYPTIAN", "Egyptian"),
    3: ("KARACHI", "Karachi"),
    4: ("UMM_AL_QURA", "Umm al-Qura"),
    5: ("DUBAI", "Dubai"),
    6: ("MOON_SIGHTING_COMMITTEE", "Moon Sighting Committee"),
    7: ("NORTH_AMERICA", "North America (ISNA)"),
    8: ("KUWAIT", "Kuwait"),
    9: ("QATAR", "Qatar"),
    10: ("SINGAPORE", "Singapore"),
    11: ("UOIF", "UOIF"),
}

MADHABS = {
    0: ("SHAFI", "Shafi/Hanbali/Maliki"),
    1: ("HANAFI", "Hanafi"),
}

HIGH_LATITUDE_RULES = {
    0: ("MIDDLE_OF_THE_NIGHT", "Middle of the night"),
    1: ("SEVENTH_OF_THE_NIGHT", "Seventh of the night"),
    2: ("TWILIGHT_ANGLE", "Twilight angle"),
}

PRAYER_ORDER = ["Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha"]

RESET = "\033[0m"
DEFAULT_COLOUR = "green"

ANSI_COLOURS = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
}
