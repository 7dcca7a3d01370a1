from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def before_path() -> Path:
    return FIXTURES / "before.txt"


@pytest.fixture
def after_path() -> Path:
    return FIXTURES / "after.txt"
