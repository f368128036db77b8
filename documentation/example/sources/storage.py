import json
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any


class AbstractUserStorage(ABC):
    @abstractmethod
    def fetch_all(self) -> Iterable[dict[str, Any]]:
        raise NotImplementedError


class JSONUserStorage(AbstractUserStorage):
    def __init__(self, path: Path):
        self.__path = path

    def fetch_all(self) -> Iterable[dict[str, Any]]:
        with self.__path.open(encoding="utf-8") as file:
            return json.load(file)
