"""Pytest configuration and shared fixtures for the notemark test suite.

This module provides shared fixtures and test configuration that are used
across the entire test suite.
"""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import (
    blockquote,
    bullet_list,
    code_block,
    doc,
    heading,
    horizontal_rule,
    list_item,
    ordered_list,
    paragraph,
    task_item,
    task_list,
    text,
)

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "security: Tests for sanitization and escaping of untrusted content")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def hello_doc() -> dict:
    """Provide the single-paragraph "Hello, World!" document."""
    return doc(paragraph(text("Hello, World!")))


@pytest.fixture
def sample_note() -> dict:
    """Provide a note exercising every node kind.

    Returns
    -------
    dict
        Editor JSON document

    """
    return doc(
        heading(2, text("Plan")),
        paragraph(text("Ship the "), text("release", "bold"), text(" on "), text("Friday", "italic")),
        bullet_list(list_item(paragraph(text("one"))), list_item(paragraph(text("two")))),
        ordered_list(list_item(paragraph(text("first"))), list_item(paragraph(text("second")))),
        task_list(task_item(True, paragraph(text("done"))), task_item(False, paragraph(text("todo")))),
        blockquote(paragraph(text("quoted"))),
        code_block("print(1)", "python"),
        horizontal_rule(),
        paragraph(text("end")),
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Remove handlers the CLI attaches to the package logger between tests."""
    yield
    package_logger = logging.getLogger("notemark")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
