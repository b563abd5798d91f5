"""
liblog — audience-aware structured logging facade for libraries.

Log calls are tagged with an audience (public/dev/internal), a category
(general/todo/troubleshooting) and a severity (trace/debug/warn/error),
then routed through one centrally configured filtering and output
policy. Inclusion is decided once per logger node at construction, so
excluded calls cost a no-op.

Public API:
    create_logger_provider — create an independent provider
    LoggerProvider         — output and filtering configuration holder
    init_logging           — singleton initialization
    get_provider           — access singleton
    get_logger             — root logger of the singleton
    ConsoleOut, NamedOut, KeyedOut — output strategies
    FilteringConfig        — filtering settings
    ProviderOptions        — provider diagnostic hooks
    Logger, UtilLogger     — logger node and its downgraded views
    Severity, Audience, Category, LogMeta — level dimensions
    metadata_of            — metadata of a log method
    should_log, Includes   — inclusion predicate and policy
    IncludeRule, parse_include_spec — per-source override rules
    StreamConsole          — default console writer
    StyleCache             — per-name styles
"""

from .levels import (
    Audience, Category, LogLevel, LogMeta, Severity,
    LEVELS, METHOD_LEVELS, METHOD_NAMES, metadata_of,
)
from .source import LogSource, SourceName
from .filtering import (
    ALL, NONE, IncludeRule, Includes,
    parse_include_spec, rules_include, should_log,
)
from .styles import DEFAULT_STYLES, StyleCache
from .sinks import StreamConsole
from .logger import Filtered, Logger, LoggerConfig, UtilLogger, build
from .provider import (
    ConsoleOut, FilteringConfig, KeyedOut, LoggerProvider, NamedOut,
    ProviderOptions, create_logger_provider, get_logger, get_provider,
    init_logging,
)
from ._version import __version__, __app_name__

__all__ = [
    'Audience', 'Category', 'LogLevel', 'LogMeta', 'Severity',
    'LEVELS', 'METHOD_LEVELS', 'METHOD_NAMES', 'metadata_of',
    'LogSource', 'SourceName',
    'ALL', 'NONE', 'IncludeRule', 'Includes',
    'parse_include_spec', 'rules_include', 'should_log',
    'DEFAULT_STYLES', 'StyleCache',
    'StreamConsole',
    'Filtered', 'Logger', 'LoggerConfig', 'UtilLogger', 'build',
    'ConsoleOut', 'FilteringConfig', 'KeyedOut', 'LoggerProvider', 'NamedOut',
    'ProviderOptions', 'create_logger_provider', 'get_logger', 'get_provider',
    'init_logging',
    '__version__', '__app_name__',
]
