"""Development tasks: ``python scripts.py <task>``."""

import subprocess
import sys

SOURCES = ["src", "tests"]


def run(*command: str) -> None:
    subprocess.run(list(command), check=True)


def test() -> None:
    run("pytest")


def test_all() -> None:
    """Unit tests plus the subprocess-based CLI tests."""
    run("pytest", "--run-cli-tests")


def coverage() -> None:
    run("pytest", "--cov=rcat", "--cov-report=term-missing", "--cov-report=xml")


def lint() -> None:
    run("flake8", "--max-line-length=120", *SOURCES)


def typecheck() -> None:
    run("mypy")


def format() -> None:
    run("black", *SOURCES)


def check() -> None:
    for task in (lint, typecheck, test):
        task()


TASKS = {f.__name__.replace("_", "-"): f for f in (test, test_all, coverage, lint, typecheck, format, check)}


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        sys.exit(f"usage: python scripts.py {{{','.join(TASKS)}}}")
    TASKS[sys.argv[1]]()
