#!/usr/bin/env python
"""
Simple Test Runner for DazzleQuery
==================================

Runs all tests except slow ones.
Shows which tests are slow and why.

Usage:
    python run_tests.py           # Run all non-slow tests
    python run_tests.py --slow    # Show info about slow tests
    python run_tests.py --all     # Run everything including slow tests
"""

import subprocess
import sys
import argparse
from pathlib import Path


def run_tests(include_slow=False):
    """Run the test suite."""
    cmd = [
        sys.executable, "-m", "pytest",
        "--tb=short",               # Short traceback format
        "--durations=10",            # Show 10 slowest tests
        "-v"                         # Verbose output
    ]
    
    if not include_slow:
        cmd.extend(["-m", "not slow"])
        print("Running all tests EXCEPT slow tests...")
        print("=" * 60)
    else:
        print("Running ALL tests including slow ones...")
        print("=" * 60)
    
    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def show_slow_tests():
    """Show information about slow tests."""
    print("=" * 60)
    print("SLOW TESTS ANALYSIS")
    print("=" * 60)
    print("\nThe following tests are marked as @pytest.mark.slow:")
    print("-" * 60)
    
    slow_tests = [
        ("test_edge_cases.py::test_very_wide_and_deep_tree",
         "Searches 200 chains of 2,000 nodes with filter_nodes and find_all",
         "~2-5s", "Builds and walks 400,000+ nodes"),
    ]
    
    for test_name, description, duration, reason in slow_tests:
        print(f"\n* {test_name}")
        print(f"   Description: {description}")
        print(f"   Duration: {duration}")
        print(f"   Why slow: {reason}")
    
    print("\n" + "=" * 60)
    print("HOW TO RUN SLOW TESTS")
    print("=" * 60)
    
    print("""
1. Run ALL slow tests:
   python -m pytest -m slow -v

2. Run everything including slow tests:
   python run_tests.py --all

They are excluded from regular test runs because they check that the
explicit-stack walks scale, not that they are correct.
""")


def main():
    parser = argparse.ArgumentParser(description="Test runner for DazzleQuery")
    parser.add_argument("--slow", action="store_true", help="Show info about slow tests")
    parser.add_argument("--all", action="store_true", help="Run all tests including slow ones")
    
    args = parser.parse_args()
    
    if args.slow:
        show_slow_tests()
        return 0
    
    return run_tests(include_slow=args.all)


if __name__ == "__main__":
    sys.exit(main())
