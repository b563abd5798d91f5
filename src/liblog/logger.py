"""
Logger nodes — pre-resolved bundles of log functions.

A node is built once per ``get_logger()`` / ``named()`` call from an
immutable LoggerConfig snapshot:

    1. resolve Includes for the node's source (defaults + include hook)
    2. for each of the 13 methods, evaluate should_log once and bind it
       either to the sink or to a Filtered no-op
    3. derive lazy variants (payload producer only called on emission)
    4. ``named()`` builds a child from the current config, so include
       rules are re-evaluated at every depth
    5. ``downgrade`` exposes audience-restricted views

Nodes are never mutated. Reconfiguring the provider does not touch
nodes that already exist.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .filtering import (
    IncludeHook, Includes, include_nothing, resolve_includes, should_log,
)
from .levels import LEVELS, METHOD_LEVELS, LogLevel
from .sinks import SinkFactory
from .source import ROOT, Key, LogSource

LogFn = Callable[..., None]
Producer = Callable[[], Any]


@dataclass(frozen=True)
class LoggerConfig:
    """Snapshot of everything node construction depends on."""
    sinks: SinkFactory
    includes: Includes = Includes()
    include: Optional[IncludeHook] = include_nothing


class Filtered:
    """Call-compatible no-op bound to excluded methods."""

    __slots__ = ('level', 'source')

    def __init__(self, level: LogLevel, source: LogSource):
        self.level = level
        self.source = source

    def __call__(self, message: str, args: Any = None) -> None:
        return None

    def __repr__(self) -> str:
        return f"Filtered({self.level!r}, {str(self.source) or 'root'!r})"


def lazy_variant(fn: LogFn) -> LogFn:
    """Wrap ``fn`` so its payload argument is a zero-argument producer."""
    def lazy_included(message: str, producer: Optional[Producer] = None) -> None:
        return fn(message, None if producer is None else producer())
    return lazy_included


@dataclass(frozen=True, eq=False, repr=False)
class LogFns:
    """The fixed set of log methods."""
    _hmm: LogFn
    _todo: LogFn
    _error: LogFn
    error_dev: LogFn
    error_public: LogFn
    _kapow: LogFn
    _warn: LogFn
    warn_dev: LogFn
    warn_public: LogFn
    _debug: LogFn
    debug_dev: LogFn
    _trace: LogFn
    trace_dev: LogFn


@dataclass(frozen=True, eq=False, repr=False)
class Logger(LogFns):
    """Internal library logger for one source.

    Usage::

        log = provider.get_logger().named('Project', project_id)
        log._debug('Opening page', {'page_id': page_id})
        log.lazy._trace('State', lambda: expensive_dump())
        helper(log.downgrade.dev())
    """
    source: LogSource
    includes: Includes
    lazy: LogFns
    _current: Callable[[], LoggerConfig]

    def named(self, name: str, key: Optional[Key] = None) -> 'Logger':
        """Child logger one level deeper in the naming tree."""
        return build(self.source.child(name, key), self._current(),
                     self._current)

    def is_included(self, method: str) -> bool:
        return not isinstance(getattr(self, method), Filtered)

    @property
    def downgrade(self) -> 'Downgrade':
        return Downgrade(self)

    def __repr__(self) -> str:
        return f"<Logger [{str(self.source) or 'root'}] {self.includes}>"


class UtilLogger:
    """Audience-restricted view with a four-method interface."""

    __slots__ = ('error', 'warn', 'debug', 'trace', '_named')

    def __init__(self, error: LogFn, warn: LogFn, debug: LogFn, trace: LogFn,
                 named: Callable[[str, Optional[Key]], 'UtilLogger']):
        self.error = error
        self.warn = warn
        self.debug = debug
        self.trace = trace
        self._named = named

    def named(self, name: str, key: Optional[Key] = None) -> 'UtilLogger':
        return self._named(name, key)


class Downgrade:
    """Factory for the internal/dev/public views of a logger."""

    __slots__ = ('_logger',)

    def __init__(self, logger: Logger):
        self._logger = logger

    def internal(self) -> UtilLogger:
        log = self._logger
        return UtilLogger(
            error=log._error, warn=log._warn,
            debug=log._debug, trace=log._trace,
            named=lambda name, key=None: log.named(name, key).downgrade.internal(),
        )

    def dev(self) -> UtilLogger:
        log = self._logger
        return UtilLogger(
            error=log.error_dev, warn=log.warn_dev,
            debug=log.debug_dev, trace=log.trace_dev,
            named=lambda name, key=None: log.named(name, key).downgrade.dev(),
        )

    def public(self) -> UtilLogger:
        """Public view. There is no public debug/trace audience, so those
        are reported through ``_warn`` with a marker instead of dropped."""
        log = self._logger

        def debug(message: str, args: Any = None) -> None:
            log._warn(f'(public "debug" filtered out) {message}', args)

        def trace(message: str, args: Any = None) -> None:
            log._warn(f'(public "trace" filtered out) {message}', args)

        return UtilLogger(
            error=log.error_public, warn=log.warn_public,
            debug=debug, trace=trace,
            named=lambda name, key=None: log.named(name, key).downgrade.public(),
        )


def build(source: LogSource, config: LoggerConfig,
          current: Callable[[], LoggerConfig] = None) -> Logger:
    """Construct the logger node for ``source`` under ``config``.

    Args:
        source: Position in the naming tree
        config: Snapshot used for this node
        current: Returns the snapshot used by ``named()`` children.
            Defaults to always returning ``config``.

    Returns:
        A fully bound Logger
    """
    if current is None:
        def current():
            return config

    includes = resolve_includes(config.includes, config.include, source)
    sink = config.sinks(source)

    bound = {}
    lazies = {}
    for method, level in METHOD_LEVELS.items():
        if should_log(includes, level):
            fn = sink.bind(method, LEVELS[method])
            bound[method] = fn
            lazies[method] = lazy_variant(fn)
        else:
            bound[method] = lazies[method] = Filtered(level, source)

    return Logger(**bound, source=source, includes=includes,
                  lazy=LogFns(**lazies), _current=current)


def root_logger(config: LoggerConfig) -> Logger:
    """Build the root node for a fixed config."""
    return build(ROOT, config)
