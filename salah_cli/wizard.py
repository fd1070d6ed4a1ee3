from .config import Config, validate_latitude, validate_longitude
from .errors import ConfigValidationError, SetupAborted
from .methods import ANSI_COLOURS, DEFAULT_COLOUR, DEFAULT_METHOD, MADHABS, METHODS


class SetupWizard:
    """Interactive prompts behind `salah-cli setup`."""

    def __init__(self, ask=input, out=print):
        self.ask = ask
        self.out = out

    def _read(self, prompt):
        try:
            return self.ask(prompt).strip()
        except (EOFError, KeyboardInterrupt) as exc:
            raise SetupAborted("failed to setup config: input cancelled") from exc

    def ask_coordinate(self, label, validate):
        while True:
            raw = self._read(f"Enter your {label}: ")
            if not raw:
                self.out("  ✖ value can't be empty")
                continue
            try:
                value = float(raw)
            except ValueError:
                self.out(f"  ✖ failed to parse {label} value: {raw!r}")
                continue
            try:
                validate(value)
            except ConfigValidationError as exc:
                self.out(f"  ✖ {exc}")
                continue
            return value

    def ask_choice(self, title, options, default):
        keys = list(options)
        self.out(title)
        for i, key in enumerate(keys, 1):
            marker = " (default)" if key == default else ""
            self.out(f"  {i}) {options[key]}{marker}")
        while True:
            raw = self._read(f"Choose [1-{len(keys)}]: ")
            if not raw:
                return default
            if raw.isdigit() and 1 <= int(raw) <= len(keys):
                return keys[int(raw) - 1]
            self.out("  ✖ Invalid input, try again.")

    def ask_yes_no(self, prompt, default=False):
        suffix = "[Y/n]" if default else "[y/N]"
        while True:
            answer = self._read(f"{prompt} {suffix}: ").lower()
            if not answer:
                return default
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            self.out("  ✖ Please answer y or n.")

    def run(self):
        latitude = self.ask_coordinate("latitude", validate_latitude)
        longitude = self.ask_coordinate("longitude", validate_longitude)
        madhab = self.ask_choice("Choose your Madhab", {k: v[1] for k, v in MADHABS.items()}, 0)
        method = self.ask_choice(
            "Choose your calculation method", {k: v[1] for k, v in METHODS.items()}, DEFAULT_METHOD
        )
        enable_countdown = self.ask_yes_no("Show a countdown to the next prayer?", default=True)
        enable_highlighting = self.ask_yes_no("Highlight the current and next prayer?")
        highlight_colour = ""
        if enable_highlighting:
            highlight_colour = self.ask_choice(
                "Choose a highlight colour", {name: name for name in ANSI_COLOURS}, DEFAULT_COLOUR
            )

        return Config(
            latitude=latitude,
            longitude=longitude,
            method=method,
            madhab=madhab,
            enable_countdown=enable_countdown,
            enable_highlighting=enable_highlighting,
            highlight_colour=highlight_colour,
        )


def setup_config(ask=input, out=print):
    return SetupWizard(ask=ask, out=out).run()
