"""
Tests for liblog.levels — the fixed method table and composite ordering.
"""

import pytest

from liblog.levels import (
    Audience, Category, LogLevel, LogMeta, Severity,
    LEVELS, METHOD_LEVELS, METHOD_NAMES, meta_of, metadata_of,
    ERROR_PUBLIC, ERROR_DEV, _HMM, _TODO, _ERROR,
    WARN_PUBLIC, WARN_DEV, _KAPOW, _WARN,
    DEBUG_DEV, _DEBUG, TRACE_DEV, _TRACE,
)


# Regression snapshot: method -> (severity, audience, category)
EXPECTED_TABLE = {
    '_hmm': ('ERROR', 'INTERNAL', 'TROUBLESHOOTING'),
    '_todo': ('ERROR', 'INTERNAL', 'TODO'),
    '_error': ('ERROR', 'INTERNAL', 'GENERAL'),
    'error_dev': ('ERROR', 'DEV', 'GENERAL'),
    'error_public': ('ERROR', 'PUBLIC', 'GENERAL'),
    '_kapow': ('WARN', 'INTERNAL', 'TROUBLESHOOTING'),
    '_warn': ('WARN', 'INTERNAL', 'GENERAL'),
    'warn_dev': ('WARN', 'DEV', 'GENERAL'),
    'warn_public': ('WARN', 'PUBLIC', 'GENERAL'),
    '_debug': ('DEBUG', 'INTERNAL', 'GENERAL'),
    'debug_dev': ('DEBUG', 'DEV', 'GENERAL'),
    '_trace': ('TRACE', 'INTERNAL', 'GENERAL'),
    'trace_dev': ('TRACE', 'DEV', 'GENERAL'),
}


# =============================================================================
# Dimension constants
# =============================================================================

class TestDimensions:
    """Bit layout of the three dimensions."""

    def test_severity_ordering(self):
        """TRACE < DEBUG < WARN < ERROR."""
        assert Severity.TRACE < Severity.DEBUG < Severity.WARN < Severity.ERROR

    def test_bit_ranges_do_not_overlap(self):
        """Category bits < audience bits < severity bits."""
        assert max(Category) < min(Audience)
        assert max(Audience) < min(Severity)

    def test_labels(self):
        assert Audience.DEV.label == 'dev'
        assert Category.TROUBLESHOOTING.label == 'troubleshooting'

    def test_severity_channels(self):
        """Each severity names the sink channel it is routed to."""
        assert [s.channel for s in Severity] == ['trace', 'debug', 'warn', 'error']


# =============================================================================
# Method table
# =============================================================================

class TestMethodTable:
    """The 13 log methods and their fixed metadata."""

    def test_method_set(self):
        assert set(METHOD_NAMES) == set(EXPECTED_TABLE)
        assert len(METHOD_NAMES) == 13

    def test_table_snapshot(self):
        """Severity, audience and category of every method are stable."""
        for method, (severity, audience, category) in EXPECTED_TABLE.items():
            meta = metadata_of(method)
            assert meta.level is Severity[severity], method
            assert meta.audience is Audience[audience], method
            assert meta.category is Category[category], method

    def test_levels_precomputed(self):
        """metadata_of is a lookup into LEVELS, not a fresh computation."""
        assert metadata_of('_warn') is LEVELS['_warn']

    def test_unknown_method_raises(self):
        with pytest.raises(KeyError):
            metadata_of('info')

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            METHOD_LEVELS['_warn'] = ERROR_PUBLIC

    def test_meta_of(self):
        assert meta_of(WARN_DEV) == LogMeta(Audience.DEV, Category.GENERAL,
                                            Severity.WARN)


# =============================================================================
# Composite ordering
# =============================================================================

class TestCompositeLevel:
    """Composite integer and explicit ordering agree."""

    def test_composite_integers(self):
        """Spot check composite values against the bit layout."""
        assert int(ERROR_PUBLIC) == 512 | 32 | 1
        assert int(_KAPOW) == 256 | 8 | 4
        assert int(_TRACE) == 64 | 8 | 1

    def test_higher_severity_always_outranks(self):
        """Every ERROR level sorts above every WARN level, and so on."""
        ordered = [_TRACE, TRACE_DEV, _DEBUG, DEBUG_DEV,
                   _WARN, _KAPOW, WARN_DEV, WARN_PUBLIC,
                   _ERROR, _TODO, _HMM, ERROR_DEV, ERROR_PUBLIC]
        assert sorted(ordered) == ordered
        assert sorted(ordered, key=int) == ordered

    def test_same_severity_secondary_order(self):
        """Within one severity: audience first, then category."""
        assert _WARN < _KAPOW < WARN_DEV < WARN_PUBLIC
        assert _ERROR < _TODO < _HMM

    def test_decode_matches_table(self):
        for level in METHOD_LEVELS.values():
            assert LogLevel.decode(int(level)) == level

    def test_decode_precedence(self):
        """Overlapping bits resolve to the first match in precedence order."""
        value = int(Severity.ERROR) | int(Severity.WARN) | int(Audience.DEV) \
            | int(Audience.PUBLIC) | int(Category.TODO) | int(Category.GENERAL)
        level = LogLevel.decode(value)
        assert level == LogLevel(Severity.ERROR, Audience.DEV, Category.TODO)

    def test_decode_without_severity_is_trace(self):
        level = LogLevel.decode(int(Audience.PUBLIC))
        assert level.severity is Severity.TRACE
        assert level.category is Category.GENERAL
