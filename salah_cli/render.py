from .methods import ANSI_COLOURS, DEFAULT_COLOUR, RESET


def format_time(dt):
    return dt.strftime("%H:%M")


def format_countdown(target, now):
    """Render the time left until target, or "" once it has passed."""
    remaining = target - now
    total_seconds = int(remaining.total_seconds())
    if total_seconds <= 0:
        return ""
    if total_seconds < 60:
        return f"in {total_seconds} sec"
    total_minutes = total_seconds // 60
    if total_minutes < 60:
        return f"in {total_minutes} min"
    hours, minutes = divmod(total_minutes, 60)
    return f"in {hours} hr {minutes} min"


def colourise(text, colour):
    code = ANSI_COLOURS.get(colour, ANSI_COLOURS[DEFAULT_COLOUR])
    return f"{code}{text}{RESET}"


def format_prayer_times(times, config, now):
    current = times.current_prayer(now) if config.enable_highlighting else None
    parts = []
    for name, at in times.items():
        entry = f"{name} {format_time(at)}"
        if name == current:
            entry = colourise(entry, config.highlight_colour)
        parts.append(entry)
    return " | ".join(parts)


def format_next_prayer(name, at, config, now):
    text = f"{name} {format_time(at)}"
    if config.enable_countdown:
        countdown = format_countdown(at, now)
        if countdown:
            text = f"{text} ({countdown})"
    if config.enable_highlighting:
        text = colourise(text, config.highlight_colour)
    return text
