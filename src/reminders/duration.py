"""Reminder duration parsing and schedule calculation."""

import math
import re
from datetime import UTC, datetime, timedelta, tzinfo

from src.reminders.exceptions import InvalidFormatError

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

# Multipliers keyed by the final character of a duration expression
UNIT_MULTIPLIERS = {
    "m": 1,
    "h": MINUTES_PER_HOUR,
    "d": MINUTES_PER_DAY,
}

_INTEGER_PREFIX = re.compile(r"[+-]?[0-9]+")


def parse_reminder_duration(value: int | float | str) -> int:
    """Convert a duration expression into a number of minutes.

    Integers are taken as minutes with no unit inference. Strings are
    trimmed, their leading integer is read, and the final character picks
    the unit: ``m`` minutes, ``h`` hours, ``d`` days. Any other final
    character is treated as minutes, so ``"5x"`` is five minutes.

    :param value: Number of minutes, or a string such as ``"30m"``, ``"2h"``, ``"1d"``.
    :returns: The duration in whole minutes.
    :raises InvalidFormatError: If no leading integer can be read, or a float is fractional.
    """
    if isinstance(value, bool):
        raise InvalidFormatError(value)

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise InvalidFormatError(value)
        return int(value)

    text = str(value).strip()

    match = _INTEGER_PREFIX.match(text)
    if match is None:
        raise InvalidFormatError(value)

    try:
        amount = int(match.group())
    except ValueError as e:
        # Past the interpreter's integer string conversion limit
        raise InvalidFormatError(value) from e

    return amount * UNIT_MULTIPLIERS.get(text[-1], 1)


def calculate_scheduled_for(minutes: int, now: datetime | None = None) -> datetime:
    """Calculate when a reminder becomes due.

    :param minutes: Offset in minutes (already validated by the caller).
    :param now: Reference instant. Defaults to the current UTC time.
    :returns: ``now`` plus ``minutes``.
    """
    if now is None:
        now = datetime.now(UTC)

    return now + timedelta(minutes=minutes)


def format_scheduled_for(when: datetime, timezone: tzinfo = UTC) -> str:
    """Format a due time in the short US date/time style, e.g. ``10/16/26, 3:45 PM``.

    :param when: Timezone-aware instant. Naive values are taken as UTC.
    :param timezone: Zone to display the time in.
    :returns: Human-readable date and time.
    """
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)

    local = when.astimezone(timezone)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{local.month}/{local.day}/{local:%y}, {hour}:{local:%M} {meridiem}"
