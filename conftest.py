import logging

import pytest

from lazycollection import ArrayCollection, LazyCollection
from lazycollection.testing import CountingFactory
from tests.helpers import EventHistory

logging.basicConfig(level=logging.DEBUG)


@pytest.fixture(scope="function")
def backing() -> ArrayCollection[str, int]:
    return ArrayCollection({"a": 1, "b": 2})


@pytest.fixture(scope="function")
def factory(backing) -> CountingFactory:
    return CountingFactory(lambda: backing)


@pytest.fixture(scope="function")
def collection(factory) -> LazyCollection[str, int]:
    return LazyCollection(factory)


@pytest.fixture(scope="function")
def event_history(collection) -> EventHistory:
    history = EventHistory()
    collection.add_listener(history)
    return history
