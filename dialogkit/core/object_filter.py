"""
Dialog Kit: custom object filter of the object picker.

Callers pass a predicate `(obj) -> bool`. Older callers pass the predicate
body as source text (e.g. "obj['common']['type'] == 'boolean'"); that path is
only honoured when the caller opts in with `allow_legacy_source=True`.
"""

import logging
from typing import Callable, Optional, Union

logger = logging.getLogger("ObjectFilter")

Predicate = Callable[[dict], bool]


def _compile_source(source: str) -> Optional[Predicate]:
    try:
        code = compile(source, "<object filter>", "eval")
    except SyntaxError as e:
        logger.error(f'Cannot parse filter function: "obj => {source}": {e}')
        return None

    def predicate(obj) -> bool:
        try:
            return bool(eval(code, {"__builtins__": {}}, {"obj": obj}))
        except Exception as e:
            logger.error(f"Filter function failed for {obj!r}: {e}")
            return True

    predicate.source = source
    return predicate


def build_filter_predicate(filter_func: Union[Predicate, str, None],
                           allow_legacy_source: bool = False) -> Optional[Predicate]:
    """Returns a predicate, or None when no filtering should happen."""
    if filter_func is None or filter_func == '':
        return None
    if callable(filter_func):
        return filter_func
    if isinstance(filter_func, str):
        if not allow_legacy_source:
            logger.warning("Ignoring filter function given as source text (legacy source filters are disabled)")
            return None
        return _compile_source(filter_func)

    logger.error(f"Unsupported filter function type: {type(filter_func).__name__}")
    return None


def apply_filter(objects, predicate: Optional[Predicate]) -> list:
    """Objects the picker should show."""
    if predicate is None:
        return list(objects)
    return [obj for obj in objects if predicate(obj)]
