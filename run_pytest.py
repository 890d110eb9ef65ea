#!/usr/bin/env python3
"""
Pytest wrapper for the hep_varproc test suite.

This script runs the tests with simple output management:
- All logs go to _test_results/test_logs/ (handled by test setup)
- Only warnings, errors, and progress are shown in stdout
- Clean start and end messages
"""

import subprocess
import sys
from datetime import datetime

KEYWORDS = [
    "warning",
    "error",
    "failed",
    "exception",
    "traceback",
    "assertion",
    "critical",
    "progress",
    "passed",
]


def run_pytest_with_filtered_output(extra_args):
    """Run pytest and show only warnings/errors/progress in stdout."""
    start_time = datetime.now()

    print("=" * 60)
    print("hep_varproc Test Suite")
    print("=" * 60)
    print(f"Starting time: {start_time.strftime('%Y-%m-%d %H:%M:%S')}")
    print("Full logs saved to: _test_results/test_logs/")
    print("=" * 60)
    print()

    cmd = [
        sys.executable,
        "-u",
        "-m",
        "pytest",
        "tests",
        "-v",
        "--tb=short",
        "--no-header",
        *extra_args,
    ]

    try:
        process = subprocess.Popen(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            universal_newlines=True,
            bufsize=1,
        )

        for line in process.stdout:
            line_lower = line.lower().strip()
            if any(keyword in line_lower for keyword in KEYWORDS):
                print(line.rstrip())

        return_code = process.wait()

        end_time = datetime.now()
        duration = (end_time - start_time).total_seconds()

        print()
        print("=" * 60)
        print(f"Tests completed: {end_time.strftime('%Y-%m-%d %H:%M:%S')}")
        print(f"Duration: {duration:.1f}s")

        if return_code == 0:
            print("✅ All tests passed")
        else:
            print(f"❌ Tests failed with exit code: {return_code}")
            if duration < 1:
                print(
                    "The run failed instantly, this is often an import error, "
                    "is the package installed (pip install -e .[dev])?"
                )

        print("=" * 60)
        return return_code

    except KeyboardInterrupt:
        print("\n🛑 Test interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(run_pytest_with_filtered_output(sys.argv[1:]))
