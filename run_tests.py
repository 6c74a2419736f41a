#!/usr/bin/env python
"""Simple test runner script for PyRGE."""

import sys
import subprocess


def run_tests():
    """Run PyRGE test suite.

    Extra command line arguments are passed on to pytest, e.g.
    ``run_tests.py -m "not integration"``.
    """
    print("Running PyRGE Test Suite")
    print("=" * 50)

    cmd = [
        sys.executable, "-m", "pytest",
        "tests/",
        "--verbose",
        "--tb=short",
        "--cov=PyRGE",
        "--cov-report=term-missing",
    ] + sys.argv[1:]

    try:
        subprocess.run(cmd, check=True)
        print("\nAll tests passed!")
        return 0
    except subprocess.CalledProcessError as e:
        print(f"\nTests failed with exit code {e.returncode}")
        return e.returncode
    except KeyboardInterrupt:
        print("\nTests interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(run_tests())
