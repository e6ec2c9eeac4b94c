"""
Dialog Kit: schedule value normalization and editor mode resolution.

A schedule handed to a cron dialog may be a bare cron expression, a quoted
cron expression, or a JSON "wizard" object (as text or already parsed).
`normalize_schedule` is the single place where the shape is inferred; the
rest of the code works with the tagged `ScheduleValue` union.

Usage:
    from dialogkit.core.schedule import ScheduleEditorState, ScheduleFlags

    state = ScheduleEditorState.open('"0 5 * * *"', ScheduleFlags())
    state.mode   # EditorMode.SIMPLE
    state.value  # '0 5 * * *'
"""

import json
import logging
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Union

from dialogkit.core.simple_cron import can_represent_as_simple

logger = logging.getLogger("ScheduleEditor")

DEFAULT_WIZARD = '{}'
DEFAULT_CRON = '* * * * *'

_LEADING_QUOTE = re.compile(r'^["\']')
_LEADING_QUOTES = re.compile(r'^["\']+')
# One or more closing quotes, each optionally followed by a newline
_TRAILING_QUOTES = re.compile(r'(?:["\']\n?)+\Z')


@dataclass(frozen=True)
class WizardSchedule:
    """Structured schedule edited by the wizard; `text` is the JSON form."""
    text: str

    def as_object(self) -> Optional[dict]:
        """Parsed wizard object, or None if the text is not a JSON object."""
        try:
            data = json.loads(self.text)
        except ValueError:
            return None
        return data if isinstance(data, dict) else None


@dataclass(frozen=True)
class CronExpression:
    """Plain cron expression with five or six fields."""
    text: str

    @property
    def has_seconds(self) -> bool:
        return len(self.text.split()) == 6


ScheduleValue = Union[WizardSchedule, CronExpression]


class EditorMode(Enum):
    SIMPLE = "simple"
    COMPLEX = "complex"
    WIZARD = "wizard"


@dataclass(frozen=True)
class ScheduleFlags:
    """Construction-time flags of a cron dialog."""
    simple: bool = False
    complex: bool = False
    no_wizard: bool = False


def normalize_schedule(raw) -> str:
    """Returns the canonical string form of a schedule input. Never raises."""
    if not raw:
        return DEFAULT_WIZARD
    if isinstance(raw, dict):
        return json.dumps(raw)
    if isinstance(raw, (WizardSchedule, CronExpression)):
        raw = raw.text
    raw = str(raw)

    if _LEADING_QUOTE.sub('', raw, count=1)[:1] != '{':
        # Bare cron expression, possibly quoted
        cron = raw.replace("'", '').replace('"', '').strip()
        return cron or DEFAULT_WIZARD

    body = _LEADING_QUOTE.sub('', raw, count=1)
    return _TRAILING_QUOTES.sub('', body)


def classify_schedule(raw) -> ScheduleValue:
    """Normalizes `raw` and tags it as wizard object or cron expression."""
    canonical = normalize_schedule(raw)
    if canonical.startswith('{'):
        return WizardSchedule(canonical)
    return CronExpression(canonical)


def is_object_shaped(value) -> bool:
    if isinstance(value, (dict, WizardSchedule)):
        return True
    if isinstance(value, CronExpression) or not value:
        return False
    return _LEADING_QUOTES.sub('', str(value))[:1] == '{'


def resolve_mode(flags: ScheduleFlags, normalized,
                 classifier: Optional[Callable[[str], bool]] = None) -> EditorMode:
    """Decides which editor a cron dialog opens with.

    Precedence: explicit simple flag, explicit complex flag, wizard for
    object-shaped values (unless no_wizard), then the simple classifier.
    An empty value, including an explicit '{}', is classified as
    '* * * * *' and so opens the simple editor under no_wizard. Handing '{}'
    to the classifier unchanged would open the raw cron editor instead.
    """
    classifier = classifier or can_represent_as_simple

    if flags.simple:
        return EditorMode.SIMPLE
    if flags.complex:
        return EditorMode.COMPLEX
    if is_object_shaped(normalized) and not flags.no_wizard:
        return EditorMode.WIZARD

    if isinstance(normalized, (WizardSchedule, CronExpression)):
        text = normalized.text
    elif isinstance(normalized, dict):
        text = json.dumps(normalized) if normalized else ''
    else:
        text = normalized or ''
    # The empty wizard object stands for "no value supplied"
    if not text or text == DEFAULT_WIZARD:
        text = DEFAULT_CRON

    return EditorMode.SIMPLE if classifier(text) else EditorMode.COMPLEX


def available_modes(flags: ScheduleFlags) -> tuple:
    """Modes the user can switch between, in display order."""
    if flags.simple and not flags.complex:
        return (EditorMode.SIMPLE,)
    if flags.complex and not flags.simple:
        return (EditorMode.COMPLEX,)

    modes = []
    if not flags.simple and not flags.complex and not flags.no_wizard:
        modes.append(EditorMode.WIZARD)
    modes.extend([EditorMode.SIMPLE, EditorMode.COMPLEX])
    return tuple(modes)


@dataclass(frozen=True)
class ScheduleEditorState:
    """In-session state of a cron dialog: the held value and the active editor."""
    value: str
    mode: EditorMode
    flags: ScheduleFlags = ScheduleFlags()

    @classmethod
    def open(cls, raw, flags: Optional[ScheduleFlags] = None,
             classifier: Optional[Callable[[str], bool]] = None) -> 'ScheduleEditorState':
        flags = flags or ScheduleFlags()
        value = normalize_schedule(raw)
        mode = resolve_mode(flags, value, classifier)
        logger.debug(f"Schedule editor opened in {mode.value} mode with '{value}'")
        return cls(value=value, mode=mode, flags=flags)

    @property
    def modes(self) -> tuple:
        return available_modes(self.flags)

    @property
    def schedule(self) -> ScheduleValue:
        return classify_schedule(self.value)

    def switch_mode(self, mode: EditorMode) -> 'ScheduleEditorState':
        """Direct transition; the held value is kept as is."""
        if mode not in self.modes:
            raise ValueError(f"Mode '{mode.value}' is not available for this dialog")
        if mode == self.mode:
            return self
        return replace(self, mode=mode)

    def set_value(self, text) -> 'ScheduleEditorState':
        return replace(self, value=normalize_schedule(text))
