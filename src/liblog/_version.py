"""
Version information for liblog.

This file is the canonical source for version numbers. Keep the
version in setup.py equal to PIP_VERSION.

Format: MAJOR.MINOR.PATCH[-PHASE]
Example: 0.3.0-beta
"""

MAJOR = 0
MINOR = 3
PATCH = 0
PHASE = "beta"  # None, "alpha", "beta", "rc1", ...

__version__ = "0.3.0-beta"
__app_name__ = "liblog"


def get_version():
    """Return the full version string."""
    return __version__


def get_pip_version():
    """
    Return a PEP 440 compliant version for pip/setuptools.

    0.3.0-alpha -> 0.3.0a0, 0.3.0-beta -> 0.3.0b0, 0.3.0-rc1 -> 0.3.0rc1
    """
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    phase_map = {"alpha": "a0", "beta": "b0"}
    if PHASE:
        base += phase_map.get(PHASE, PHASE)
    return base


VERSION = get_version()
PIP_VERSION = get_pip_version()
