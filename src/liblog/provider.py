"""
LoggerProvider — process-wide holder of the logging configuration.

The provider owns two things:

    output     which sink factory new nodes use: the built-in console
               (styled or plain) or an external named/keyed factory
    filtering  global Includes defaults plus an optional include hook
               that overrides them per source

Every change replaces an immutable LoggerConfig snapshot. Nodes built
before a change keep the snapshot they were built from; only nodes
built afterwards (including ``named()`` children of old nodes) see the
new configuration.

Usage::

    provider = create_logger_provider()
    provider.configure_console(ConsoleOut(style=False))
    provider.configure_filtering(FilteringConfig(
        dev=True,
        include=['Rendering:none:off:off', 'Page#p1:all::on'],
    ))
    log = provider.get_logger().named('App')
"""

import threading
from dataclasses import dataclass, fields
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from .filtering import (
    Floor, IncludeHook, IncludeRule, Includes, include_nothing, rules_include,
)
from .logger import Logger, LoggerConfig, build
from .sinks import (
    StreamConsole, keyed_external, named_external, plain_console,
    styled_console,
)
from .source import ROOT, SourceName
from .styles import DEFAULT_STYLES, StyleCache

DEFAULT_INCLUDES = Includes()
DEFAULT_CONSOLE_STYLE = True


# =============================================================================
# Configuration values
# =============================================================================

@dataclass(frozen=True)
class ConsoleOut:
    """Built-in console output.

    Attributes:
        style: Per-name colours (default True)
        console: Console-like object (default: the provider's console)
    """
    style: Optional[bool] = None
    console: Any = None


@dataclass(frozen=True)
class NamedOut:
    """External loggers keyed by the list of ``"name"`` / ``"name (key)"``."""
    named: Callable[[List[str]], Any]


@dataclass(frozen=True)
class KeyedOut:
    """External loggers keyed by the list of ``(name, key)`` pairs."""
    keyed: Callable[[List[SourceName]], Any]


ConsoleConfig = Union[str, ConsoleOut, NamedOut, KeyedOut, Mapping[str, Any]]


@dataclass(frozen=True)
class FilteringConfig:
    """Filtering settings; omitted fields fall back to the defaults.

    ``include`` is either a hook ``(LogSource) -> overrides | None`` or a
    sequence of IncludeRule / include spec strings.
    """
    console_style: Optional[bool] = None
    dev: Optional[bool] = None
    internal: Optional[bool] = None
    min: Optional[Floor] = None
    include: Union[IncludeHook, Sequence[Union[str, IncludeRule]], None] = None


@dataclass(frozen=True)
class ProviderOptions:
    """Diagnostic hooks for the provider itself, ``(message, args=None)``."""
    error: Optional[Callable[..., None]] = None
    debug: Optional[Callable[..., None]] = None


_OUT_TYPES = {
    'console': ConsoleOut,
    'named': NamedOut,
    'keyed': KeyedOut,
}

_FILTERING_FIELDS = {f.name for f in fields(FilteringConfig)}


def _console_config_from_mapping(config: Mapping[str, Any]):
    kind = _OUT_TYPES.get(config.get('type'))
    if kind is None:
        return None
    try:
        return kind(**{k: v for k, v in config.items() if k != 'type'})
    except TypeError:
        return None


# =============================================================================
# Provider
# =============================================================================

class LoggerProvider:
    """Central holder of output and filtering configuration.

    Args:
        console: Console-like object for the built-in sink
            (default: StreamConsole on stderr)
        options: Diagnostic hooks
        styles: Style cache for the styled console (default: process-wide)
    """

    def __init__(self, console: Any = None, options: ProviderOptions = None,
                 styles: StyleCache = None):
        self._default_console = console if console is not None else StreamConsole()
        self._options = options if options is not None else ProviderOptions()
        self._styles = styles if styles is not None else DEFAULT_STYLES
        self._lock = threading.Lock()

        self._console = self._default_console
        self._console_style = DEFAULT_CONSOLE_STYLE
        self._external = None
        self._includes = DEFAULT_INCLUDES
        self._include: IncludeHook = include_nothing
        self._config = self._snapshot()

    # -- configuration --------------------------------------------------------

    def configure_console(self, config: ConsoleConfig) -> None:
        """Select the output strategy for loggers built from now on.

        Accepts ``"console"``, ConsoleOut, NamedOut, KeyedOut, or a mapping
        with a ``type`` key of ``"console"``, ``"named"`` or ``"keyed"``.
        Anything else leaves the current strategy in place.
        """
        if isinstance(config, Mapping):
            config = _console_config_from_mapping(config)
        if not (config == 'console'
                or isinstance(config, (ConsoleOut, NamedOut, KeyedOut))):
            self._report_error("Unrecognized console config", {'config': config})
            return

        with self._lock:
            if config == 'console':
                self._console = self._default_console
                self._console_style = DEFAULT_CONSOLE_STYLE
                self._external = None
            elif isinstance(config, ConsoleOut):
                self._console = (config.console if config.console is not None
                                 else self._default_console)
                self._console_style = (config.style if config.style is not None
                                       else DEFAULT_CONSOLE_STYLE)
                self._external = None
            elif isinstance(config, KeyedOut):
                self._external = keyed_external(config.keyed)
            else:
                self._external = named_external(config.named)
            self._config = self._snapshot()

        self._report_debug("Console configured", {'config': config})

    def configure_filtering(
            self, config: Union[FilteringConfig, Mapping[str, Any]] = None) -> None:
        """Replace the filtering defaults and the include hook.

        ``dev``, ``internal`` and ``min`` each fall back to their defaults
        (False, False, Severity.WARN) when omitted. The include hook is
        always replaced; omitting it restores the no-op hook.
        """
        if config is None:
            config = FilteringConfig()
        elif isinstance(config, Mapping):
            unknown = set(config) - _FILTERING_FIELDS
            if unknown:
                self._report_error("Ignoring unknown filtering fields",
                                   {'fields': sorted(unknown)})
            config = FilteringConfig(
                **{k: v for k, v in config.items() if k in _FILTERING_FIELDS})

        include = config.include
        if isinstance(include, str):
            include = [include]
        if include is None:
            include = include_nothing
        elif not callable(include):
            include = rules_include(include)

        includes = Includes(
            min=config.min if config.min is not None else DEFAULT_INCLUDES.min,
            dev=config.dev if config.dev is not None else DEFAULT_INCLUDES.dev,
            internal=(config.internal if config.internal is not None
                      else DEFAULT_INCLUDES.internal),
        )

        with self._lock:
            self._includes = includes
            self._include = include
            if config.console_style is not None:
                self._console_style = config.console_style
            self._config = self._snapshot()

        self._report_debug("Filtering configured", {'includes': includes})

    # -- access ---------------------------------------------------------------

    def snapshot(self) -> LoggerConfig:
        """Current configuration snapshot."""
        return self._config

    def get_logger(self) -> Logger:
        """Root logger built from the current configuration."""
        return build(ROOT, self._config, self.snapshot)

    @property
    def includes(self) -> Includes:
        return self._includes

    @property
    def console_style(self) -> bool:
        return self._console_style

    # -- internals ------------------------------------------------------------

    def _snapshot(self) -> LoggerConfig:
        if self._external is not None:
            sinks = self._external
        elif self._console_style:
            sinks = styled_console(self._console, self._styles)
        else:
            sinks = plain_console(self._console)
        return LoggerConfig(sinks=sinks, includes=self._includes,
                            include=self._include)

    def _report_debug(self, message: str, args: Any = None) -> None:
        if self._options.debug is not None:
            self._options.debug(message, args)

    def _report_error(self, message: str, args: Any = None) -> None:
        if self._options.error is not None:
            self._options.error(message, args)


def create_logger_provider(console: Any = None,
                           options: ProviderOptions = None) -> LoggerProvider:
    """Create an independent provider with default configuration."""
    return LoggerProvider(console=console, options=options)


# =============================================================================
# Module-level singleton
# =============================================================================

_provider: Optional[LoggerProvider] = None


def init_logging(dev: bool = False, internal: bool = False,
                 min: Floor = None, rules: Sequence[str] = None,
                 style: bool = None, console: Any = None) -> LoggerProvider:
    """Initialize the module-level provider singleton.

    Call once at program startup.

    Args:
        dev: Include logs meant for developers using the library
        internal: Include logs meant for the library's maintainers
        min: Floor (default Severity.WARN)
        rules: Include rule spec strings (e.g. ``['Rendering:none:off:off']``)
        style: Colour the console prefix (default True)
        console: Console-like object (default: stderr)

    Returns:
        The initialized LoggerProvider
    """
    global _provider

    provider = create_logger_provider(console)
    if style is not None:
        provider.configure_console(ConsoleOut(style=style))
    provider.configure_filtering(FilteringConfig(
        dev=dev, internal=internal, min=min, include=rules or None,
    ))

    _provider = provider
    return _provider


def get_provider() -> LoggerProvider:
    """Get the module-level provider, creating a default if needed."""
    global _provider
    if _provider is None:
        _provider = create_logger_provider()
    return _provider


def get_logger() -> Logger:
    """Root logger of the module-level provider."""
    return get_provider().get_logger()
