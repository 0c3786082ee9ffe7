"""
Baseline Template Functions
Available in every template, both as globals and as filters

    {{ now() | date('%Y') }}
    {{ title | trunc(20) }}
    {{ count | plural('item', 'items') }}
"""
import json
import re
import uuid
from datetime import date as date_type, datetime
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional


def now() -> datetime:
    return datetime.now()


def date(value: Any = None, fmt: str = '%Y-%m-%d') -> str:
    """Format a date, datetime or unix timestamp (now when omitted)"""
    if value is None:
        value = datetime.now()
    elif isinstance(value, (int, float)):
        value = datetime.fromtimestamp(value)
    if isinstance(value, (datetime, date_type)):
        return value.strftime(fmt)
    return str(value)


_WORD_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|[\s\-_]+')


def _words(value: Any):
    return [w for w in _WORD_BOUNDARY.split(str(value)) if w]


def snakecase(value: Any) -> str:
    return '_'.join(w.lower() for w in _words(value))


def kebabcase(value: Any) -> str:
    return '-'.join(w.lower() for w in _words(value))


def camelcase(value: Any) -> str:
    return ''.join(w[:1].upper() + w[1:].lower() for w in _words(value))


def trunc(value: Any, length: int) -> str:
    """Keep the first length characters; a negative length keeps the last ones"""
    text = str(value)
    if length < 0:
        return text[length:]
    return text[:length]


def abbrev(value: Any, width: int) -> str:
    """Truncate with an ellipsis so the result is at most width characters"""
    text = str(value)
    if len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return text[:width - 3] + '...'


def plural(count: int, one: str, many: str) -> str:
    return one if count == 1 else many


def has_prefix(value: Any, prefix: str) -> bool:
    return str(value).startswith(prefix)


def has_suffix(value: Any, suffix: str) -> bool:
    return str(value).endswith(suffix)


def contains(value: Any, sub: str) -> bool:
    return sub in str(value)


def quote(value: Any) -> str:
    return json.dumps(str(value))


def squote(value: Any) -> str:
    return f"'{value}'"


def coalesce(*values: Any) -> Optional[Any]:
    """First value that is not empty"""
    for value in values:
        if value:
            return value
    return None


def ternary(condition: Any, when_true: Any, when_false: Any) -> Any:
    return when_true if condition else when_false


def to_json(value: Any, indent: Optional[int] = None) -> str:
    return json.dumps(value, indent=indent, default=str)


def initials(value: Any) -> str:
    return ''.join(w[0].upper() for w in str(value).split())


def nospace(value: Any) -> str:
    return re.sub(r'\s+', '', str(value))


def repeat(value: Any, count: int) -> str:
    return str(value) * count


def uuidv4() -> str:
    return str(uuid.uuid4())


BASELINE_FUNCTIONS: Mapping[str, Callable] = MappingProxyType({
    'now': now,
    'date': date,
    'snakecase': snakecase,
    'kebabcase': kebabcase,
    'camelcase': camelcase,
    'trunc': trunc,
    'abbrev': abbrev,
    'plural': plural,
    'has_prefix': has_prefix,
    'has_suffix': has_suffix,
    'contains': contains,
    'quote': quote,
    'squote': squote,
    'coalesce': coalesce,
    'ternary': ternary,
    'to_json': to_json,
    'initials': initials,
    'nospace': nospace,
    'repeat': repeat,
    'uuidv4': uuidv4,
})


def build_function_table(custom: Optional[Mapping[str, Callable]] = None) -> Dict[str, Callable]:
    """
    Fresh name -> function table: baseline first, custom functions on top

    Example:
        build_function_table({'upper_first': lambda s: s[:1].upper() + s[1:]})
    """
    table = dict(BASELINE_FUNCTIONS)
    table.update(custom or {})
    return table
