"""Shared pytest fixtures for the unistroke_lib test suite.

Fixtures:
    templates: TemplateSet of ten canonical straight-line strokes
    template_file: Path to the same reference set written in the
        3000-line data format
    recognizer: Recognizer built from ``templates``

Markers:
    integration: Mark test as integration test
"""

import sys
from pathlib import Path

import pytest

# Project root for the package, this directory for the factories module
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from factories import line_templates  # noqa: E402

from unistroke_lib.api.recognizer import Recognizer  # noqa: E402
from unistroke_lib.templates.loader import save_template_file  # noqa: E402


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture
def templates():
    """Ten canonical reference strokes."""
    return line_templates()


@pytest.fixture
def template_file(tmp_path, templates):
    """Reference data file holding ``templates``."""
    return save_template_file(templates, tmp_path / "strokedata.txt")


@pytest.fixture
def recognizer(templates):
    """Recognizer over the synthetic reference set."""
    return Recognizer(templates)
