"""Tests for liblog._version — PEP 440 compliance and version parsing."""

import re

import liblog
from liblog._version import (
    MAJOR, MINOR, PATCH, PHASE,
    PIP_VERSION, VERSION,
    get_pip_version, get_version,
)


def test_version_matches_components():
    """Full version should start with the MAJOR.MINOR.PATCH constants."""
    assert get_version().startswith(f"{MAJOR}.{MINOR}.{PATCH}")


def test_pip_version_pep440():
    """PIP version must be PEP 440 compliant (no hyphens, proper pre-release)."""
    pip_ver = get_pip_version()
    assert "-" not in pip_ver, \
        f"PEP 440 forbids hyphens in version: {pip_ver}"
    assert re.match(r"^\d+\.\d+\.\d+((a|b|rc)\d+)?$", pip_ver), \
        f"Unexpected PIP version: {pip_ver}"


def test_phase_mapping():
    """Beta phase should map to 'b0' in PEP 440."""
    if PHASE == "beta":
        assert get_pip_version().endswith("b0")


def test_module_level_constants():
    assert VERSION == liblog.__version__
    assert PIP_VERSION
    assert liblog.__app_name__ == "liblog"
