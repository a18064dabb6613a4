"""Pytest configuration and shared fixtures for the pandoc_filter test suite."""

import copy
import os
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=30)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


SAMPLE_DOCUMENT: dict[str, Any] = {
    "pandoc-api-version": [1, 23, 1],
    "meta": {
        "title": {"t": "MetaInlines", "c": [{"t": "Str", "c": "Sample"}, {"t": "Space"}, {"t": "Str", "c": "Doc"}]},
        "draft": {"t": "MetaBool", "c": True},
    },
    "blocks": [
        {
            "t": "Header",
            "c": [1, ["intro", [], []], [{"t": "Str", "c": "Introduction"}]],
        },
        {
            "t": "Para",
            "c": [
                {"t": "Str", "c": "Hello"},
                {"t": "Space"},
                {"t": "Emph", "c": [{"t": "Str", "c": "pandoc"}]},
                {"t": "SoftBreak"},
                {"t": "Code", "c": [["", [], []], "x = 1"]},
            ],
        },
        {
            "t": "BulletList",
            "c": [
                [{"t": "Plain", "c": [{"t": "Str", "c": "one"}]}],
                [{"t": "Plain", "c": [{"t": "Str", "c": "two"}]}],
            ],
        },
    ],
}


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """Provide a fresh deep copy of a small pandoc document.

    Returns
    -------
    dict
        Document with a header, a paragraph of mixed inlines and a bullet list.

    """
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def sample_blocks(sample_document) -> list[dict[str, Any]]:
    """Provide the body of the sample document."""
    return sample_document["blocks"]
