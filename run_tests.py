#!/usr/bin/env python3
"""
Test runner script for PyFastResize.

Shortcuts for running the different test suites with pytest.
"""
import argparse
import os
import subprocess
import sys

SUITES = {
    "imports": ["tests/test_imports.py"],
    "unit": ["tests/unit/"],
    "integration": ["tests/integration/"],
    "taichi": ["tests/unit/test_taichi_backend.py"],
}


def run_pytest(paths, extra, description):
    """Run pytest on the given paths and return True on success."""
    print(f"→ {description}")
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [".", env.get("PYTHONPATH")]))
    cmd = [sys.executable, "-m", "pytest", *extra, *paths]
    return subprocess.run(cmd, env=env).returncode == 0


def main():
    parser = argparse.ArgumentParser(
        description="PyFastResize test runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py --imports          # Import tests only
  python run_tests.py --unit             # Unit tests only
  python run_tests.py --integration      # Integration tests only
  python run_tests.py --taichi           # Taichi backend tests only
  python run_tests.py --all              # Every suite, one after the other
  python run_tests.py --fast             # Everything except slow tests
        """,
    )
    group = parser.add_mutually_exclusive_group()
    for suite in SUITES:
        group.add_argument(f"--{suite}", action="store_true", help=f"Run {suite} tests only")
    group.add_argument("--all", action="store_true", help="Run all suites")
    group.add_argument("--fast", action="store_true", help="Skip tests marked slow")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--coverage", action="store_true", help="Run with coverage report")

    args = parser.parse_args()

    extra = ["-v" if args.verbose else "-q", "--disable-warnings"]
    if args.coverage:
        extra += ["--cov=pyfastresize", "--cov-report=html", "--cov-report=term"]

    selected = [suite for suite in SUITES if getattr(args, suite)]
    if selected:
        suite = selected[0]
        success = run_pytest(SUITES[suite], extra, f"Running {suite} tests")
    elif args.fast:
        success = run_pytest(["tests/"], extra + ["-m", "not slow"], "Running fast tests")
    elif args.all:
        print("Running complete test suite...")
        success = True
        for suite in ("imports", "unit", "integration"):
            if not run_pytest(SUITES[suite], extra, f"{suite.capitalize()} tests"):
                success = False
    else:
        success = run_pytest(
            SUITES["imports"] + SUITES["unit"],
            extra,
            "Running basic test suite (imports + unit tests)",
        )

    if success:
        print("\n✅ All tests passed!")
        return 0
    print("\n❌ Some tests failed!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
