import itertools
from datetime import date
from unittest.mock import MagicMock

import pytest

from config.settings import Settings
from repository.rental_store import RentalStore

TODAY = date(2024, 5, 20)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"new{next(counter)}"


@pytest.fixture
def store(id_factory):
    """Seeded store with a fixed clock and predictable ids."""
    return RentalStore.from_seed(id_factory=id_factory, clock=lambda: TODAY)


@pytest.fixture
def empty_store(id_factory):
    return RentalStore(id_factory=id_factory, clock=lambda: TODAY)


@pytest.fixture
def settings():
    return Settings(
        anthropic_api_key=None,
        anthropic_model="claude-test",
        llm_timeout_seconds=30.0,
        llm_max_tokens=1000,
        log_level="INFO",
        log_dir="logs",
    )


def make_response(text):
    """Shape of an Anthropic Messages API response with one text block."""
    block = MagicMock()
    block.type = "text"
    block.text = text
    response = MagicMock()
    response.content = [block]
    return response


@pytest.fixture
def fake_client():
    client = MagicMock()
    client.messages.create.return_value = make_response("생성된 답변")
    return client
