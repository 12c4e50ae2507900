import random
from unittest.mock import MagicMock

import pytest

from shortcutter.dao.base import ShortcutBaseDAO
from shortcutter.service import ShortcutService


@pytest.fixture
def dao() -> ShortcutBaseDAO:
    """Mock mapping store honoring the ShortcutBaseDAO interface."""
    return MagicMock(spec=ShortcutBaseDAO)


@pytest.fixture
def rng() -> random.Random:
    """Random source whose draw is always 0."""
    _rng = MagicMock(spec=random.Random)
    _rng.randrange.return_value = 0
    return _rng


@pytest.fixture
def service(dao, rng) -> ShortcutService:
    return ShortcutService(dao=dao, domain='localhost:8080', rng=rng)
