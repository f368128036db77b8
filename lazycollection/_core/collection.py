from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterator
from typing import Any

type Predicate[K, V] = Callable[[K, V], bool]


class Collection[K: Hashable, V](ABC):
    __slots__ = ()

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def __iter__(self) -> Iterator[V]:
        raise NotImplementedError

    @abstractmethod
    def __contains__(self, element: Any, /) -> bool:
        raise NotImplementedError

    @abstractmethod
    def __getitem__(self, key: K, /) -> V:
        raise NotImplementedError

    @abstractmethod
    def __setitem__(self, key: K | None, value: V, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def __delitem__(self, key: K, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def contains(self, element: V) -> bool:
        raise NotImplementedError

    @abstractmethod
    def contains_key(self, key: K) -> bool:
        raise NotImplementedError

    @abstractmethod
    def add(self, element: V) -> bool:
        raise NotImplementedError

    @abstractmethod
    def remove(self, key: K) -> V | None:
        raise NotImplementedError

    @abstractmethod
    def remove_element(self, element: V) -> bool:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, key: K) -> V | None:
        raise NotImplementedError

    @abstractmethod
    def set(self, key: K, value: V) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_keys(self) -> list[K]:
        raise NotImplementedError

    @abstractmethod
    def get_values(self) -> list[V]:
        raise NotImplementedError

    @abstractmethod
    def to_dict(self) -> dict[K, V]:
        raise NotImplementedError

    @abstractmethod
    def slice(self, offset: int, length: int | None = None) -> dict[K, V]:
        raise NotImplementedError

    @abstractmethod
    def first(self) -> V | None:
        raise NotImplementedError

    @abstractmethod
    def last(self) -> V | None:
        raise NotImplementedError

    @abstractmethod
    def key(self) -> K | None:
        raise NotImplementedError

    @abstractmethod
    def current(self) -> V | None:
        raise NotImplementedError

    @abstractmethod
    def next(self) -> V | None:
        raise NotImplementedError

    @abstractmethod
    def exists(self, predicate: Predicate[K, V]) -> bool:
        raise NotImplementedError

    @abstractmethod
    def for_all(self, predicate: Predicate[K, V]) -> bool:
        raise NotImplementedError

    @abstractmethod
    def find_first(self, predicate: Predicate[K, V]) -> V | None:
        raise NotImplementedError

    @abstractmethod
    def filter(self, predicate: Predicate[K, V]) -> "Collection[K, V]":
        raise NotImplementedError

    @abstractmethod
    def map[U](self, function: Callable[[V], U]) -> "Collection[K, U]":
        raise NotImplementedError

    @abstractmethod
    def reduce[R](
        self,
        function: Callable[[R, V], R],
        initial: R | None = None,
    ) -> R | None:
        raise NotImplementedError

    @abstractmethod
    def partition(
        self,
        predicate: Predicate[K, V],
    ) -> tuple["Collection[K, V]", "Collection[K, V]"]:
        raise NotImplementedError

    @abstractmethod
    def index_of(self, element: V) -> K | None:
        raise NotImplementedError
