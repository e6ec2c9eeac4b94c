"""
Dialog Kit: human readable cron descriptions.

Used by the cron dialogs as a live preview under the editor:
    cron_to_text('0 5 * * *')      -> 'At 05:00 every day'
    cron_to_text('*/5 * * * *')    -> 'Every 5 minutes'
    cron_to_text('0 8 * * 1-5')    -> 'At 08:00 on Monday, Tuesday, Wednesday, Thursday and Friday'
"""

import re
from dataclasses import dataclass
from typing import Optional

from dialogkit.core.errors import CronParseError

MONTH_NAMES = ["January", "February", "March", "April", "May", "June", "July",
               "August", "September", "October", "November", "December"]
DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

_NAME_VALUES = {name[:3].upper(): i + 1 for i, name in enumerate(MONTH_NAMES)}
_DOW_VALUES = {name[:3].upper(): i for i, name in enumerate(DAY_NAMES)}

MACROS = {
    '@YEARLY': '0 0 1 1 *',
    '@ANNUALLY': '0 0 1 1 *',
    '@MONTHLY': '0 0 1 * *',
    '@WEEKLY': '0 0 * * 0',
    '@DAILY': '0 0 * * *',
    '@MIDNIGHT': '0 0 * * *',
    '@HOURLY': '0 * * * *',
}

# name, low, high
_FIELDS = {
    'second': (0, 59),
    'minute': (0, 59),
    'hour': (0, 23),
    'day': (1, 31),
    'month': (1, 12),
    'weekday': (0, 7),
}

_STEP = re.compile(r'^(\*|\d+)/(\d+)$')


@dataclass
class CronField:
    """Parsed field: `values` is None when the field matches everything."""
    values: Optional[list]
    step: Optional[int] = None

    @property
    def any(self) -> bool:
        return self.values is None


def _to_number(token: str, name: str, expression: str) -> int:
    if token.isdigit():
        return int(token)
    table = _NAME_VALUES if name == 'month' else _DOW_VALUES if name == 'weekday' else {}
    value = table.get(token.upper())
    if value is None:
        raise CronParseError(expression, f"unknown {name} value '{token}'")
    return value


def _parse_field(text: str, name: str, expression: str) -> CronField:
    low, high = _FIELDS[name]
    if text in ('*', '?'):
        return CronField(None)

    step_match = _STEP.match(text)
    if step_match and step_match.group(1) in ('*', str(low)):
        step = int(step_match.group(2))
        if step <= 0:
            raise CronParseError(expression, f"step of {name} must be positive")
        if step == 1:
            return CronField(None)
        values = {0 if v == 7 else v for v in range(low, high + 1, step)} if name == 'weekday' \
            else set(range(low, high + 1, step))
        return CronField(sorted(values), step=step)

    values = set()
    for part in text.split(','):
        step = 1
        if '/' in part:
            part, step_text = part.split('/', 1)
            if not step_text.isdigit() or int(step_text) <= 0:
                raise CronParseError(expression, f"invalid step '{step_text}' in {name}")
            step = int(step_text)
        if part == '*':
            start, end = low, high
        elif '-' in part:
            first, last = part.split('-', 1)
            start, end = _to_number(first, name, expression), _to_number(last, name, expression)
        else:
            start = _to_number(part, name, expression)
            end = high if step > 1 else start
        if start < low or end > high or start > end:
            raise CronParseError(expression, f"{name} value out of range in '{text}'")
        values.update(range(start, end + 1, step))

    if name == 'weekday' and 7 in values:
        values.discard(7)
        values.add(0)
    return CronField(sorted(values))


def parse_cron(expression: str, with_seconds: Optional[bool] = None) -> dict:
    """Splits a cron expression into parsed fields keyed by field name."""
    text = (expression or '').replace("'", '').replace('"', '').strip()
    if not text:
        raise CronParseError(expression, "empty expression")
    text = MACROS.get(text.upper(), text)

    parts = text.split()
    if with_seconds is None:
        with_seconds = len(parts) == 6
    expected = 6 if with_seconds else 5
    if len(parts) != expected:
        raise CronParseError(expression, f"expected {expected} fields, got {len(parts)}")
    if not with_seconds:
        parts.insert(0, '0')

    names = ['second', 'minute', 'hour', 'day', 'month', 'weekday']
    fields = {name: _parse_field(part, name, expression) for name, part in zip(names, parts)}
    fields['with_seconds'] = with_seconds
    return fields


def _ordinal(number: int) -> str:
    if number % 100 in (11, 12, 13):
        return f"{number}th"
    suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(number % 10, 'th')
    return f"{number}{suffix}"


def _join(words: list) -> str:
    words = [str(w) for w in words]
    if len(words) < 2:
        return words[0] if words else ''
    return f"{', '.join(words[:-1])} and {words[-1]}"


def _every(step: Optional[int], unit: str) -> str:
    if not step or step == 1:
        return f"Every {unit}"
    return f"Every {step} {unit}s"


def _describe_time(f: dict) -> tuple:
    """Returns (sentence, is_time_of_day)."""
    second, minute, hour = f['second'], f['minute'], f['hour']
    with_seconds = f['with_seconds']
    fixed_seconds = not with_seconds or (not second.any and second.step is None)

    if (not minute.any and not hour.any and minute.step is None and hour.step is None
            and len(minute.values) <= 2 and len(hour.values) <= 2 and fixed_seconds
            and (not with_seconds or len(second.values) <= 2)):
        times = []
        for h in hour.values:
            for m in minute.values:
                if with_seconds:
                    times.extend(f"{h:02d}:{m:02d}:{s:02d}" for s in second.values)
                else:
                    times.append(f"{h:02d}:{m:02d}")
        return f"At {_join(times)}", True

    if with_seconds and (second.any or second.step) and minute.any and hour.any:
        return _every(second.step, "second"), False

    if minute.step and hour.any:
        return _every(minute.step, "minute"), False
    if minute.any and hour.any:
        return "Every minute", False

    if hour.step and not minute.any and minute.values == [0]:
        return _every(hour.step, "hour"), False
    if hour.any and not minute.any:
        return f"Every hour at minute {_join(minute.values)}", False

    if minute.any:
        return f"Every minute of the {_join([_ordinal(h) for h in hour.values])} hour", False
    if minute.step:
        return f"{_every(minute.step, 'minute')} during hour {_join(hour.values)}", False
    return (f"At minute {_join(minute.values)} past the "
            f"{_join([_ordinal(h) for h in hour.values])} hour"), False


def cron_to_text(expression: str, with_seconds: Optional[bool] = None) -> str:
    """Returns an English sentence describing the cron expression."""
    fields = parse_cron(expression, with_seconds)
    text, time_of_day = _describe_time(fields)

    day, weekday, month = fields['day'], fields['weekday'], fields['month']
    if not day.any:
        text += f" on the {_join([_ordinal(d) for d in day.values])}"
        if month.any:
            text += " of every month"
    if not weekday.any:
        text += " and every " if not day.any else " on "
        text += _join([DAY_NAMES[d] for d in weekday.values])
    if day.any and weekday.any and time_of_day:
        text += " every day"
    if not month.any:
        text += f" in {_join([MONTH_NAMES[m - 1] for m in month.values])}"
    return text
