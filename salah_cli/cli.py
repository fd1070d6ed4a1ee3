import argparse
import logging
import sys

from .calc import local_now, next_prayer_info, todays_prayer_times, tomorrows_prayer_times
from .config import get_config_path, load, save_config
from .errors import ConfigValidationError, SalahError
from .methods import HIGH_LATITUDE_RULES, MADHABS, METHODS
from .params import build_calculation_params
from .render import format_next_prayer, format_prayer_times
from .wizard import setup_config

logger = logging.getLogger(__name__)

USAGE = """Usage:
  salah-cli today             Show today's prayer times
  salah-cli next              Show the next upcoming prayer time
  salah-cli validate-config   Validate the config file
  salah-cli setup             Create the config file interactively
  salah-cli methods           List the codes accepted for method, madhab and high_latitude_rule
  salah-cli help              Show this help

Options:
  --config PATH               Use PATH instead of the default config file
  -v, --verbose               Log debug output to stderr"""


def setup_logging(verbose=False):
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def run_today(args, clock):
    config = load(args.config)
    params = build_calculation_params(config)
    now = clock()
    today = todays_prayer_times(config, params, now)
    print(format_prayer_times(today, config, now))
    return 0


def run_next(args, clock):
    config = load(args.config)
    params = build_calculation_params(config)
    now = clock()
    today = todays_prayer_times(config, params, now)
    tomorrow = tomorrows_prayer_times(config, params, now)
    name, at = next_prayer_info(today, tomorrow, now)
    print(format_next_prayer(name, at, config, now))
    return 0


def run_validate_config(args, clock):
    try:
        load(args.config)
    except ConfigValidationError as exc:
        print(f"❌ Invalid config: {exc}")
        return 1
    except SalahError as exc:
        print(f"❌ Failed to load config: {exc}")
        return 1
    print("✅ Config is valid!")
    return 0


def run_setup(args, clock):
    path = args.config or get_config_path()
    config = setup_config()
    save_config(config, path)
    print(f"Successfully written config file to {path}")
    return 0


def run_methods(args, clock):
    for title, table in (
        ("method", METHODS),
        ("madhab", MADHABS),
        ("high_latitude_rule", HIGH_LATITUDE_RULES),
    ):
        print(f"{title}:")
        for code, (_, label) in table.items():
            print(f"  {code}: {label}")
    return 0


COMMANDS = {
    "today": run_today,
    "next": run_next,
    "validate-config": run_validate_config,
    "setup": run_setup,
    "methods": run_methods,
}


def build_arg_parser():
    parser = argparse.ArgumentParser(prog="salah-cli", description="Islamic prayer times", add_help=False)
    parser.add_argument("command", nargs="?", help="Command to run")
    parser.add_argument("-h", "--help", action="store_true", help="Show usage")
    parser.add_argument("--config", help="Path to the config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def main(argv=None, clock=local_now):
    parser = build_arg_parser()
    args, extra = parser.parse_known_args(argv)
    setup_logging(args.verbose)

    if extra:
        print(f"Unknown command: {' '.join(extra)}")
        print(USAGE)
        return 1

    if args.help or args.command in (None, "help"):
        print(USAGE)
        return 0

    handler = COMMANDS.get(args.command)
    if handler is None:
        print(f"Unknown command: {args.command}")
        print(USAGE)
        return 1

    logger.debug("Running command %s", args.command)
    try:
        return handler(args, clock)
    except SalahError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
