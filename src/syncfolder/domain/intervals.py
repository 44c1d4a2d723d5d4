"""Rescan interval policy."""

MAX_RESCAN_INTERVAL_S = 365 * 24 * 60 * 60


def clamp_rescan_interval(value: int, maximum: int = MAX_RESCAN_INTERVAL_S) -> int:
    """Clamp ``value`` into ``[0, maximum]``; in-range values pass through."""
    if value > maximum:
        return maximum
    if value < 0:
        return 0
    return value
