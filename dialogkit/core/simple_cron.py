"""
Dialog Kit: simple cron classifier.

Decides whether a cron expression can be edited with the simple schedule
builder and converts between the builder state and cron text.

The builder knows three shapes:
    interval          every N seconds / minutes / hours
    interval_between  every N seconds / minutes inside an hour range
    specific          at fixed times of the day
each optionally limited to a set of weekdays. Day of month and month
must be '*'.
"""

import re
from dataclasses import dataclass
from typing import Optional

MODE_INTERVAL = "interval"
MODE_INTERVAL_BETWEEN = "interval_between"
MODE_SPECIFIC = "specific"

UNITS = ("seconds", "minutes", "hours")

_STEP = re.compile(r'^(?:\*|0)/(\d+)$')
_RANGE = re.compile(r'^(\d+)-(\d+)$')


@dataclass(frozen=True)
class SimpleCronState:
    mode: str
    period: int = 1
    unit: str = "minutes"
    hour_from: int = 0
    hour_to: int = 23
    seconds: tuple = ()
    minutes: tuple = (0,)
    hours: tuple = (0,)
    weekdays: tuple = ()  # empty means every day
    with_seconds: bool = False


def _parse_step(field: str) -> Optional[int]:
    """'*' -> 1, '*/N' or '0/N' -> N, anything else -> None."""
    if field == '*':
        return 1
    match = _STEP.match(field)
    if not match:
        return None
    period = int(match.group(1))
    return period if period > 0 else None


def _parse_numbers(field: str, low: int, high: int) -> Optional[tuple]:
    """Comma separated numbers and a-b ranges inside [low, high]."""
    values = []
    for part in field.split(','):
        match = _RANGE.match(part)
        if match:
            start, end = int(match.group(1)), int(match.group(2))
            if start > end:
                return None
            values.extend(range(start, end + 1))
        elif part.isdigit():
            values.append(int(part))
        else:
            return None
    if any(v < low or v > high for v in values):
        return None
    return tuple(sorted(set(values)))


def _parse_weekdays(field: str) -> Optional[tuple]:
    if field == '*':
        return ()
    days = _parse_numbers(field, 0, 7)
    if days is None:
        return None
    # 7 is Sunday as well
    days = tuple(sorted({0 if d == 7 else d for d in days}))
    return () if len(days) == 7 else days


def _is_zero(field: Optional[str]) -> bool:
    return field is None or field == '0'


def cron_to_state(cron: str) -> Optional[SimpleCronState]:
    """Returns the simple builder state for `cron`, or None if it is too complex."""
    if not cron or not isinstance(cron, str):
        return None
    parts = cron.replace("'", '').replace('"', '').split()
    if len(parts) not in (5, 6):
        return None

    with_seconds = len(parts) == 6
    seconds = parts.pop(0) if with_seconds else None
    minutes, hours, dom, month, dow = parts

    if dom != '*' or month != '*':
        return None
    weekdays = _parse_weekdays(dow)
    if weekdays is None:
        return None

    common = dict(weekdays=weekdays, with_seconds=with_seconds)

    # Every N seconds
    if seconds is not None and minutes == '*' and hours == '*':
        period = _parse_step(seconds)
        if period:
            return SimpleCronState(MODE_INTERVAL, period=period, unit="seconds", **common)

    # Every N minutes
    if _is_zero(seconds) and hours == '*':
        period = _parse_step(minutes)
        if period:
            return SimpleCronState(MODE_INTERVAL, period=period, unit="minutes", **common)

    # Every N hours
    if _is_zero(seconds) and minutes == '0':
        period = _parse_step(hours)
        if period:
            return SimpleCronState(MODE_INTERVAL, period=period, unit="hours", **common)

    # Every N seconds/minutes between two hours
    hour_range = _RANGE.match(hours)
    if hour_range:
        hour_from, hour_to = int(hour_range.group(1)), int(hour_range.group(2))
        if hour_from <= hour_to <= 23:
            between = dict(hour_from=hour_from, hour_to=hour_to, **common)
            if seconds is not None and minutes == '*':
                period = _parse_step(seconds)
                if period:
                    return SimpleCronState(MODE_INTERVAL_BETWEEN, period=period, unit="seconds", **between)
            if _is_zero(seconds):
                period = _parse_step(minutes)
                if period:
                    return SimpleCronState(MODE_INTERVAL_BETWEEN, period=period, unit="minutes", **between)

    # At fixed times
    fixed_minutes = _parse_numbers(minutes, 0, 59)
    fixed_hours = _parse_numbers(hours, 0, 23)
    fixed_seconds = _parse_numbers(seconds, 0, 59) if seconds is not None else ()
    if fixed_minutes and fixed_hours and fixed_seconds is not None:
        return SimpleCronState(MODE_SPECIFIC, seconds=fixed_seconds, minutes=fixed_minutes,
                               hours=fixed_hours, **common)

    return None


def can_represent_as_simple(cron) -> bool:
    return cron_to_state(cron) is not None


def _join(values) -> str:
    return ','.join(str(v) for v in values)


def _step(period: int) -> str:
    return '*' if period == 1 else f'*/{period}'


def state_to_cron(state: SimpleCronState) -> str:
    """Renders a builder state back into cron text."""
    dow = _join(state.weekdays) if state.weekdays else '*'

    if state.mode == MODE_INTERVAL:
        if state.unit == "seconds":
            fields = [_step(state.period), '*', '*']
        elif state.unit == "hours":
            fields = ['0', '0', _step(state.period)]
        else:
            fields = ['0', _step(state.period), '*']
    elif state.mode == MODE_INTERVAL_BETWEEN:
        hours = f'{state.hour_from}-{state.hour_to}'
        if state.unit == "seconds":
            fields = [_step(state.period), '*', hours]
        else:
            fields = ['0', _step(state.period), hours]
    elif state.mode == MODE_SPECIFIC:
        fields = [_join(state.seconds) or '0', _join(state.minutes), _join(state.hours)]
    else:
        raise ValueError(f"Unknown simple cron mode: {state.mode}")

    # Seconds are only written when the expression needs them
    if not state.with_seconds and fields[0] == '0':
        fields = fields[1:]
    return ' '.join(fields + ['*', '*', dow])
