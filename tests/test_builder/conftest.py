from __future__ import annotations

import pytest

from brickify import convert


@pytest.fixture
def build():
    """Convert markup with a fixed id seed; options are passed as keywords."""

    def _build(html: str, css: str = "", js: str = "", **options):
        return convert(html, css, js, options or None, seed=7)

    return _build
