from typing import Any, Dict

import pytest

from tests.fakes import FakeGlob, FakeLineEditor, FakeScreen


@pytest.fixture
def rl():
    return FakeLineEditor()


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def glob():
    return FakeGlob()


@pytest.fixture
def question() -> Dict[str, Any]:
    return {"name": "test", "message": "test:"}
