from collections.abc import Iterable
from typing import Any

import pytest
from faker import Faker

from sources.storage import AbstractUserStorage


class FakeUserStorage(AbstractUserStorage):
    def __init__(self, faker: Faker, size: int = 5):
        self.__rows = [
            {
                "id": faker.uuid4(),
                "username": faker.user_name(),
                "email": faker.email(),
                "is_active": index % 2 == 0,
            }
            for index in range(size)
        ]
        self.fetches = 0

    def fetch_all(self) -> Iterable[dict[str, Any]]:
        self.fetches += 1
        return list(self.__rows)


@pytest.fixture(scope="function", autouse=True)
def setup_faker():
    Faker.seed(0)


@pytest.fixture(scope="function")
def storage() -> FakeUserStorage:
    return FakeUserStorage(Faker())
