"""
Level encoding — severity x audience x category.

Every named log method collapses into one composite level built from
three orthogonal dimensions:

    category   GENERAL=1   TODO=2   TROUBLESHOOTING=4
    audience   INTERNAL=8  DEV=16   PUBLIC=32
    severity   TRACE=64    DEBUG=128  WARN=256  ERROR=512

The composite integer is ``severity | audience | category``. Ordering
is severity first, then audience, then category, so a higher severity
always outranks any audience/category difference.

The method table is fixed. Metadata for each method is computed once at
import time, never per call.
"""

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from types import MappingProxyType
from typing import Mapping, Tuple


class Category(IntEnum):
    """Topical tag, carried as metadata only."""
    GENERAL = 1 << 0
    TODO = 1 << 1
    TROUBLESHOOTING = 1 << 2

    @property
    def label(self) -> str:
        return self.name.lower()


class Audience(IntEnum):
    """Who a log line is meant for."""
    INTERNAL = 1 << 3   # maintainers of the library
    DEV = 1 << 4        # developers using the library
    PUBLIC = 1 << 5     # end users of the app

    @property
    def label(self) -> str:
        return self.name.lower()


class Severity(IntEnum):
    """Ordered severity, also used as a filter floor."""
    TRACE = 1 << 6
    DEBUG = 1 << 7
    WARN = 1 << 8
    ERROR = 1 << 9

    @property
    def channel(self) -> str:
        """Sink channel this severity is routed to."""
        return self.name.lower()


@total_ordering
@dataclass(frozen=True, eq=True)
class LogLevel:
    """Composite level: exactly one severity, audience and category."""
    severity: Severity
    audience: Audience
    category: Category

    def sort_key(self) -> Tuple[int, int, int]:
        return (self.severity, self.audience, self.category)

    def __lt__(self, other):
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __int__(self) -> int:
        # Each dimension occupies its own bit range, so the sum is the OR.
        return int(self.severity) + int(self.audience) + int(self.category)

    @classmethod
    def decode(cls, value: int) -> 'LogLevel':
        """Recover a composite level from its integer form.

        Each dimension is an independent bit test. When several bits of
        one dimension are set, the first in precedence order wins.
        """
        def has(flag):
            return value & flag == flag

        if has(Audience.INTERNAL):
            audience = Audience.INTERNAL
        elif has(Audience.DEV):
            audience = Audience.DEV
        else:
            audience = Audience.PUBLIC

        if has(Category.TROUBLESHOOTING):
            category = Category.TROUBLESHOOTING
        elif has(Category.TODO):
            category = Category.TODO
        else:
            category = Category.GENERAL

        for severity in (Severity.ERROR, Severity.WARN, Severity.DEBUG):
            if has(severity):
                break
        else:
            severity = Severity.TRACE

        return cls(severity, audience, category)

    def __repr__(self) -> str:
        return (f"LogLevel({self.severity.name}, {self.audience.name}, "
                f"{self.category.name})")


@dataclass(frozen=True)
class LogMeta:
    """Decomposed metadata passed to external loggers with every call."""
    audience: Audience
    category: Category
    level: Severity


# =============================================================================
# Named composite levels
# =============================================================================

ERROR_PUBLIC = LogLevel(Severity.ERROR, Audience.PUBLIC, Category.GENERAL)
ERROR_DEV = LogLevel(Severity.ERROR, Audience.DEV, Category.GENERAL)
# an unexpected event
_HMM = LogLevel(Severity.ERROR, Audience.INTERNAL, Category.TROUBLESHOOTING)
_TODO = LogLevel(Severity.ERROR, Audience.INTERNAL, Category.TODO)
_ERROR = LogLevel(Severity.ERROR, Audience.INTERNAL, Category.GENERAL)
WARN_PUBLIC = LogLevel(Severity.WARN, Audience.PUBLIC, Category.GENERAL)
WARN_DEV = LogLevel(Severity.WARN, Audience.DEV, Category.GENERAL)
# temporary debug marker, should not be left in the code
_KAPOW = LogLevel(Severity.WARN, Audience.INTERNAL, Category.TROUBLESHOOTING)
_WARN = LogLevel(Severity.WARN, Audience.INTERNAL, Category.GENERAL)
DEBUG_DEV = LogLevel(Severity.DEBUG, Audience.DEV, Category.GENERAL)
_DEBUG = LogLevel(Severity.DEBUG, Audience.INTERNAL, Category.GENERAL)
TRACE_DEV = LogLevel(Severity.TRACE, Audience.DEV, Category.GENERAL)
_TRACE = LogLevel(Severity.TRACE, Audience.INTERNAL, Category.GENERAL)


METHOD_LEVELS: Mapping[str, LogLevel] = MappingProxyType({
    '_hmm': _HMM,
    '_todo': _TODO,
    '_error': _ERROR,
    'error_dev': ERROR_DEV,
    'error_public': ERROR_PUBLIC,
    '_kapow': _KAPOW,
    '_warn': _WARN,
    'warn_dev': WARN_DEV,
    'warn_public': WARN_PUBLIC,
    '_debug': _DEBUG,
    'debug_dev': DEBUG_DEV,
    '_trace': _TRACE,
    'trace_dev': TRACE_DEV,
})

METHOD_NAMES: Tuple[str, ...] = tuple(METHOD_LEVELS)


def meta_of(level: LogLevel) -> LogMeta:
    """Decompose a composite level into its metadata triple."""
    return LogMeta(audience=level.audience, category=level.category,
                   level=level.severity)


LEVELS: Mapping[str, LogMeta] = MappingProxyType(
    {name: meta_of(level) for name, level in METHOD_LEVELS.items()}
)


def metadata_of(method: str) -> LogMeta:
    """Look up the metadata of one of the fixed log methods.

    Raises:
        KeyError: if ``method`` is not part of the fixed method set.
    """
    return LEVELS[method]
