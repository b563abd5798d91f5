"""
Sink adapters — where bound log functions actually send their output.

Two families:

    console   a console-like object with error/warn/info/debug methods.
              The call-site prefix is rendered once per node, either
              plain (" App Page#p1") or styled (per-name ANSI colours).
    external  a caller-supplied logger with error/warn/debug/trace
              methods receiving the decomposed LogMeta on every call,
              so it can render and filter however it likes.

Console channel mapping (kept for console-like compatibility):

    error -> error    warn -> warn    debug -> info    trace -> debug

A sink factory takes a LogSource and returns a sink; the logger builder
asks the sink to ``bind(method, meta)`` for every included method.
Exceptions raised by a console or external logger propagate to the
caller of the log method.
"""

import functools
import sys
from typing import Any, Callable, List, Optional, Sequence, TextIO, Tuple

import colorama

from .levels import LogMeta
from .source import LogSource, SourceName
from .styles import DEFAULT_STYLES, RESET, StyleCache, kapow

CONSOLE_METHODS = {
    'error': 'error',
    'warn': 'warn',
    'debug': 'info',
    'trace': 'debug',
}

Prefix = Tuple[str, ...]


class StreamConsole:
    """Console-like writer: one line per call to a text stream.

    ``%c`` directives in the first argument take the next argument as a
    style sequence, the way browser consoles do. Other arguments are
    joined with spaces.
    """

    def __init__(self, file: TextIO = None):
        self._file = file
        colorama.just_fix_windows_console()

    @property
    def file(self) -> TextIO:
        return self._file if self._file is not None else sys.stderr

    def error(self, message: Any, *args: Any) -> None:
        self._write(message, args)

    def warn(self, message: Any, *args: Any) -> None:
        self._write(message, args)

    def info(self, message: Any, *args: Any) -> None:
        self._write(message, args)

    def debug(self, message: Any, *args: Any) -> None:
        self._write(message, args)

    def _write(self, message: Any, args: Sequence[Any]) -> None:
        print(render(message, *args), file=self.file)


def render(message: Any, *args: Any) -> str:
    """Render console arguments into one line of text."""
    text = str(message).lstrip(' ')
    rest = list(args)
    if '%c' in text:
        pieces = text.split('%c')
        out = [pieces[0]]
        for piece in pieces[1:]:
            style = rest.pop(0) if rest else ''
            out.append(RESET + str(style) + piece)
        out.append(RESET)
        text = ''.join(out)
    parts = [text] + [a if isinstance(a, str) else repr(a) for a in rest]
    return ' '.join(p for p in parts if p != '')


# =============================================================================
# Prefix rendering
# =============================================================================

def plain_prefix(source: LogSource) -> Prefix:
    """Space-joined names, ``#key`` appended where present."""
    return (''.join(f" {n}" for n in source.names),)


def styled_prefix(source: LogSource, styles: StyleCache) -> Prefix:
    """Format template with ``%c`` directives followed by its styles."""
    template = ''
    style_args: List[str] = []
    for name, key in source.names:
        template += f" %c{name}"
        style_args.append(styles.style(name))
        if key is not None:
            key_label = f"#{key}"
            template += f"%c{key_label}"
            style_args.append(styles.style(key_label))
    return (template, *style_args)


def kapow_prefix(prefix: Prefix) -> Prefix:
    """Emphasize every style of a styled prefix."""
    return (prefix[0],) + tuple(kapow(s) for s in prefix[1:])


# =============================================================================
# Sinks
# =============================================================================

class ConsoleSink:
    """Routes bound log calls to a console-like object."""

    def __init__(self, console: Any, prefix: Prefix,
                 kapow_prefix: Optional[Prefix] = None):
        self.console = console
        self.prefix = prefix
        self.kapow_prefix = kapow_prefix if kapow_prefix is not None else prefix

    def emit(self, channel: str, prefix: Prefix, message: str,
             args: Any = None) -> None:
        write = getattr(self.console, CONSOLE_METHODS[channel])
        if args is None:
            write(*prefix, message)
        else:
            write(*prefix, message, args)

    def bind(self, method: str, meta: LogMeta) -> Callable[..., None]:
        prefix = self.kapow_prefix if method == '_kapow' else self.prefix
        return functools.partial(self.emit, meta.level.channel, prefix)


class ExternalSink:
    """Routes bound log calls to a caller-supplied logger."""

    def __init__(self, logger: Any):
        self.logger = logger

    def emit(self, channel: str, meta: LogMeta, message: str,
             args: Any = None) -> None:
        getattr(self.logger, channel)(meta, message, args)

    def bind(self, method: str, meta: LogMeta) -> Callable[..., None]:
        return functools.partial(self.emit, meta.level.channel, meta)


# =============================================================================
# Sink factories
# =============================================================================

SinkFactory = Callable[[LogSource], Any]


def plain_console(console: Any) -> SinkFactory:
    """Console sink factory without colour codes."""
    def factory(source: LogSource) -> ConsoleSink:
        return ConsoleSink(console, plain_prefix(source))
    return factory


def styled_console(console: Any, styles: StyleCache = None) -> SinkFactory:
    """Console sink factory with per-name styles from ``styles``."""
    if styles is None:
        styles = DEFAULT_STYLES

    def factory(source: LogSource) -> ConsoleSink:
        prefix = styled_prefix(source, styles)
        return ConsoleSink(console, prefix, kapow_prefix(prefix))
    return factory


def keyed_external(keyed: Callable[[List[SourceName]], Any]) -> SinkFactory:
    """External factory receiving the ``(name, key)`` pairs of the source."""
    def factory(source: LogSource) -> ExternalSink:
        return ExternalSink(keyed(list(source.names)))
    return factory


def named_external(named: Callable[[List[str]], Any]) -> SinkFactory:
    """External factory receiving names, keys folded in as ``name (key)``."""
    def factory(source: LogSource) -> ExternalSink:
        names = [n.name if n.key is None else f"{n.name} ({n.key})"
                 for n in source.names]
        return ExternalSink(named(names))
    return factory
