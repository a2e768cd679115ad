from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.go_source import GoSourceWriter

TESTDATA = Path(__file__).with_name("testdata")


@pytest.fixture
def go_source(tmp_path: Path) -> GoSourceWriter:
    """Provide a writer for Go sources rooted at the pytest tmp_path."""
    return GoSourceWriter(tmp_path)


@pytest.fixture
def testdata() -> Path:
    return TESTDATA
