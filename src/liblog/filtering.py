"""
Inclusion predicate and per-source include rules.

The emit rule for a composite level is:

    audience gate  AND  floor <= level

    PUBLIC    always passes the audience gate
    DEV       passes when includes.dev
    INTERNAL  passes when includes.internal

The floor check compares against the raw composite integer (severity,
audience and category bits together) unless the floor is itself a
LogLevel. A Severity floor therefore admits every level of that
severity and above, while an arbitrary integer floor can split one
severity by audience/category. That ordering is kept as is.

Include rule spec syntax (compact, positional):
    PATH:MIN:DEV:INTERNAL

    Examples:
        Rendering:none:off:off     # silence everything under Rendering
        XYZSystem:::on             # internal logs for XYZSystem subtrees
        App.Page#p1:all::on        # everything for page p1 under App
        Importer:debug             # lower the floor for Importer

Empty slots inherit the global defaults.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, Union

from .levels import Audience, LogLevel, Severity
from .source import LogSource, SourceName

Floor = Union[Severity, LogLevel, int, float]

ALL: Floor = 0
NONE: Floor = float('inf')

_OVERRIDE_FIELDS = ('min', 'dev', 'internal')


@dataclass(frozen=True)
class Includes:
    """Resolved filtering policy for one log source."""
    min: Floor = Severity.WARN
    dev: bool = False
    internal: bool = False

    def merged(self, overrides: Any) -> 'Includes':
        """Return a copy with the fields present in ``overrides`` applied.

        ``overrides`` may be None (inherit everything), a mapping, or any
        object exposing ``min``/``dev``/``internal`` attributes. Missing
        and None-valued fields are inherited.
        """
        if overrides is None:
            return self
        changes = {}
        for name in _OVERRIDE_FIELDS:
            if isinstance(overrides, Mapping):
                value = overrides.get(name)
            else:
                value = getattr(overrides, name, None)
            if value is not None:
                changes[name] = value
        return replace(self, **changes) if changes else self


IncludeHook = Callable[[LogSource], Any]


def include_nothing(source: LogSource) -> None:
    """Default include hook: every source uses the global defaults."""
    return None


def at_least(floor: Floor, level: LogLevel) -> bool:
    """True when ``level`` is at or above ``floor``."""
    if isinstance(floor, LogLevel):
        return floor <= level
    return floor <= int(level)


def should_log(includes: Includes, level: LogLevel) -> bool:
    """Decide whether ``level`` is emitted under ``includes``."""
    if level.audience is Audience.PUBLIC:
        audience_ok = True
    elif level.audience is Audience.DEV:
        audience_ok = includes.dev
    elif level.audience is Audience.INTERNAL:
        audience_ok = includes.internal
    else:
        audience_ok = False
    return bool(audience_ok) and at_least(includes.min, level)


def resolve_includes(defaults: Includes, include: Optional[IncludeHook],
                     source: LogSource) -> Includes:
    """Merge the include hook's answer for ``source`` over the defaults."""
    if include is None:
        return defaults
    return defaults.merged(include(source))


# =============================================================================
# Include rules
# =============================================================================

@dataclass(frozen=True)
class IncludeRule:
    """Per-subtree override of the global filtering defaults.

    A rule applies to a source when its path occurs as a contiguous run
    of the source's names. A path segment without a key matches any key.
    """
    path: Tuple[SourceName, ...] = ()
    min: Optional[Floor] = None
    dev: Optional[bool] = None
    internal: Optional[bool] = None

    def matches(self, source: LogSource) -> bool:
        names = source.names
        width = len(self.path)
        for start in range(len(names) - width + 1):
            if all(_segment_matches(seg, names[start + i])
                   for i, seg in enumerate(self.path)):
                return True
        return False


def _segment_matches(pattern: SourceName, name: SourceName) -> bool:
    if pattern.name != name.name:
        return False
    if pattern.key is None:
        return True
    return name.key is not None and str(pattern.key) == str(name.key)


_FLOOR_NAMES = {
    'trace': Severity.TRACE,
    'debug': Severity.DEBUG,
    'warn': Severity.WARN,
    'warning': Severity.WARN,
    'error': Severity.ERROR,
    'all': ALL,
    'none': NONE,
}

_BOOL_NAMES = {
    '1': True, 'true': True, 'yes': True, 'on': True,
    '0': False, 'false': False, 'no': False, 'off': False,
}


def parse_floor(text: str) -> Floor:
    """Parse a floor name (``warn``, ``all``, ``none``...) or an integer."""
    key = text.strip().lower()
    if key in _FLOOR_NAMES:
        return _FLOOR_NAMES[key]
    try:
        return int(key)
    except ValueError:
        raise ValueError(f"Invalid log floor: {text!r}") from None


def _parse_bool(text: str) -> bool:
    key = text.strip().lower()
    if key not in _BOOL_NAMES:
        raise ValueError(f"Invalid boolean in include spec: {text!r}")
    return _BOOL_NAMES[key]


def _parse_path(text: str) -> Tuple[SourceName, ...]:
    if not text:
        return ()
    segments = []
    for part in text.split('.'):
        name, sep, key = part.partition('#')
        if not name:
            raise ValueError(f"Empty name in include path: {text!r}")
        if sep and not key:
            raise ValueError(f"Empty key in include path: {text!r}")
        segments.append(SourceName(name, key if sep else None))
    return tuple(segments)


def parse_include_spec(spec: str) -> IncludeRule:
    """Parse an include rule spec string into an IncludeRule.

    Args:
        spec: Rule spec like ``"Rendering:none:off:off"`` or ``"XYZSystem:::on"``

    Returns:
        IncludeRule with parsed values (None for empty slots)

    Raises:
        ValueError: on too many slots or an unparseable value
    """
    parts = spec.split(':')
    if len(parts) > 4:
        raise ValueError(f"Too many fields in include spec: {spec!r}")

    path = _parse_path(parts[0].strip())
    floor = dev = internal = None

    if len(parts) > 1 and parts[1]:
        floor = parse_floor(parts[1])
    if len(parts) > 2 and parts[2]:
        dev = _parse_bool(parts[2])
    if len(parts) > 3 and parts[3]:
        internal = _parse_bool(parts[3])

    return IncludeRule(path=path, min=floor, dev=dev, internal=internal)


def rules_include(rules: Iterable[Union[IncludeRule, str]]) -> IncludeHook:
    """Build an include hook from rules; the first matching rule wins."""
    parsed = tuple(parse_include_spec(r) if isinstance(r, str) else r
                   for r in rules)

    def include(source: LogSource) -> Optional[IncludeRule]:
        for rule in parsed:
            if rule.matches(source):
                return rule
        return None

    return include
