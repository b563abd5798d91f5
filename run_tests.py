#!/usr/bin/env python3
"""
Test runner for liblog.

Usage:
    python run_tests.py             # Run the test suite
    python run_tests.py -k provider # Run tests matching an expression
    python run_tests.py --list      # List available test modules
    python run_tests.py --coverage  # Run with coverage report
"""

import sys
import subprocess
import argparse
from pathlib import Path


def run_tests(verbose=True, coverage=False, keyword=None):
    """
    Run pytest over tests/.

    Args:
        verbose: Whether to show verbose output.
        coverage: Whether to run with coverage analysis (needs pytest-cov).
        keyword: Optional -k expression.

    Returns:
        Exit code from pytest.
    """
    cmd = [
        sys.executable, "-m", "pytest",
        "tests/",
        "--tb=short",
    ]

    if verbose:
        cmd.append("-v")

    if keyword:
        cmd.extend(["-k", keyword])

    if coverage:
        cmd.extend([
            "--cov=liblog",
            "--cov-report=term-missing",
        ])

    print(f"Running: {' '.join(cmd)}")
    print("=" * 60)

    result = subprocess.run(cmd)
    return result.returncode


def list_tests():
    """List available test modules."""
    test_files = sorted(Path("tests").glob("test_*.py"))

    print()
    print("Available test modules:")
    print("-" * 40)
    for test_file in test_files:
        print(f"  {test_file.stem}")
    print("-" * 40)
    print()
    print("Run a specific module: python -m pytest tests/test_logger.py")


def main():
    """Main entry point for test runner."""
    parser = argparse.ArgumentParser(
        description="Test runner for liblog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py              # Run all tests
  python run_tests.py -k filtering # Only tests matching 'filtering'
  python run_tests.py --coverage   # Run with coverage report
  python run_tests.py --list       # List test modules
        """
    )

    parser.add_argument(
        "-k", dest="keyword", default=None,
        help="Only run tests matching the given expression"
    )
    parser.add_argument(
        "--coverage", action="store_true",
        help="Run tests with coverage analysis"
    )
    parser.add_argument(
        "--list", action="store_true",
        help="List available test modules"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="Less verbose output"
    )

    args = parser.parse_args()

    if args.list:
        list_tests()
        return 0

    print("=" * 60)
    print("LIBLOG TEST SUITE")
    print("=" * 60)
    print()

    exit_code = run_tests(
        verbose=not args.quiet,
        coverage=args.coverage,
        keyword=args.keyword,
    )

    print()
    print("=" * 60)
    if exit_code == 0:
        print("SUCCESS: All tests passed!")
    else:
        print(f"FAILED: Tests failed with exit code {exit_code}")
    print("=" * 60)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
