"""Test configuration and fixtures for rcat."""

import logging

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture(autouse=True)
def reset_rcat_logger():
    """Drop handlers installed by configure_logging so they don't outlive captured streams."""
    yield
    logger = logging.getLogger("rcat")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def proj(tmp_path):
    """Create the sample project: a.rs, b.txt and sub/c.rs."""
    root = tmp_path / "proj"
    root.mkdir()
    (root / "a.rs").write_text('fn main() {\n    println!("a");\n}\n')
    (root / "b.txt").write_text("plain text\n")
    (root / "sub").mkdir()
    (root / "sub" / "c.rs").write_text("pub fn c() {}\n")
    return root
