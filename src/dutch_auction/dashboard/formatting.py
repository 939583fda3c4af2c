"""Display helpers for countdowns and durations."""

from decimal import Decimal


def format_time_remaining(seconds: Decimal | float) -> str:
    """Render a countdown, e.g. '1d 2h 3m', '2h 5m 9s' or '4m 0s'.

    Fractional seconds are truncated; negative input renders as '0m 0s'.
    """
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)

    if days > 0:
        return f"{days}d {hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    return f"{minutes}m {secs}s"


def format_duration(seconds: int) -> str:
    """Render an auction duration in whole minutes, e.g. '60 minutes'."""
    minutes = seconds // 60
    unit = "minute" if minutes == 1 else "minutes"
    return f"{minutes} {unit}"
