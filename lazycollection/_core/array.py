from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from typing import Any, override

from lazycollection._core.collection import Collection, Predicate
from lazycollection.exceptions import NoSuchKey


class ArrayCollection[K: Hashable, V](Collection[K, V]):
    """
    Ordered key/value collection. Integer keys make it behave like a list, any other
    hashable keys like an insertion-ordered dict.
    """

    __slots__ = ("__elements", "__entries", "__next_index", "__position")

    __elements: dict[K, V]
    __entries: tuple[tuple[K, V], ...] | None
    __next_index: int
    __position: int

    def __init__(self, elements: Mapping[K, V] | Iterable[V] = (), /) -> None:
        if isinstance(elements, Mapping):
            self.__elements = dict(elements)
        else:
            self.__elements = dict(enumerate(elements))  # type: ignore[arg-type]

        self.__entries = None
        self.__next_index = max(
            (key + 1 for key in self.__elements if self.__is_index(key)),
            default=0,
        )
        self.__position = 0

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.__elements!r})"

    @override
    def __len__(self) -> int:
        return len(self.__elements)

    @override
    def __iter__(self) -> Iterator[V]:
        return iter(tuple(self.__elements.values()))

    @override
    def __contains__(self, element: Any, /) -> bool:
        return self.contains(element)

    @override
    def __getitem__(self, key: K, /) -> V:
        try:
            return self.__elements[key]
        except KeyError as exc:
            raise NoSuchKey(key) from exc

    @override
    def __setitem__(self, key: K | None, value: V, /) -> None:
        if key is None:
            self.add(value)
            return

        self.set(key, value)

    @override
    def __delitem__(self, key: K, /) -> None:
        try:
            del self.__elements[key]
        except KeyError as exc:
            raise NoSuchKey(key) from exc

        self.__entries = None

    @override
    def count(self) -> int:
        return len(self)

    @override
    def is_empty(self) -> bool:
        return not self.__elements

    @override
    def contains(self, element: V) -> bool:
        return any(value == element for value in self.__elements.values())

    @override
    def contains_key(self, key: K) -> bool:
        return key in self.__elements

    @override
    def add(self, element: V) -> bool:
        self.set(self.__next_index, element)  # type: ignore[arg-type]
        return True

    @override
    def remove(self, key: K) -> V | None:
        self.__entries = None
        return self.__elements.pop(key, None)

    @override
    def remove_element(self, element: V) -> bool:
        key = self.index_of(element)

        if key is None:
            return False

        del self.__elements[key]
        self.__entries = None
        return True

    @override
    def clear(self) -> None:
        self.__elements.clear()
        self.__entries = None
        self.__next_index = 0

    @override
    def get(self, key: K) -> V | None:
        return self.__elements.get(key)

    @override
    def set(self, key: K, value: V) -> None:
        self.__elements[key] = value
        self.__entries = None

        if self.__is_index(key) and key >= self.__next_index:
            self.__next_index = key + 1  # type: ignore[operator]

    @override
    def get_keys(self) -> list[K]:
        return list(self.__elements)

    @override
    def get_values(self) -> list[V]:
        return list(self.__elements.values())

    @override
    def to_dict(self) -> dict[K, V]:
        return dict(self.__elements)

    @override
    def slice(self, offset: int, length: int | None = None) -> dict[K, V]:
        items = tuple(self.__elements.items())

        if offset < 0:
            offset = max(len(items) + offset, 0)

        if length is None:
            stop = None
        elif length < 0:
            stop = len(items) + length
        else:
            stop = offset + length

        return dict(items[offset:stop])

    @override
    def first(self) -> V | None:
        self.__position = 0
        return self.current()

    @override
    def last(self) -> V | None:
        self.__position = max(len(self.__elements) - 1, 0)
        return self.current()

    @override
    def key(self) -> K | None:
        entry = self.__entry()
        return None if entry is None else entry[0]

    @override
    def current(self) -> V | None:
        entry = self.__entry()
        return None if entry is None else entry[1]

    @override
    def next(self) -> V | None:
        self.__position += 1
        return self.current()

    @override
    def exists(self, predicate: Predicate[K, V]) -> bool:
        return any(predicate(key, value) for key, value in self.__elements.items())

    @override
    def for_all(self, predicate: Predicate[K, V]) -> bool:
        return all(predicate(key, value) for key, value in self.__elements.items())

    @override
    def find_first(self, predicate: Predicate[K, V]) -> V | None:
        for key, value in self.__elements.items():
            if predicate(key, value):
                return value

        return None

    @override
    def filter(self, predicate: Predicate[K, V]) -> "ArrayCollection[K, V]":
        return self.__from_items(
            (key, value)
            for key, value in self.__elements.items()
            if predicate(key, value)
        )

    @override
    def map[U](self, function: Callable[[V], U]) -> "ArrayCollection[K, U]":
        return self.__from_items(
            (key, function(value)) for key, value in self.__elements.items()
        )

    @override
    def reduce[R](
        self,
        function: Callable[[R, V], R],
        initial: R | None = None,
    ) -> R | None:
        carry = initial

        for value in self.__elements.values():
            carry = function(carry, value)  # type: ignore[arg-type]

        return carry

    @override
    def partition(
        self,
        predicate: Predicate[K, V],
    ) -> tuple["ArrayCollection[K, V]", "ArrayCollection[K, V]"]:
        matches: dict[K, V] = {}
        non_matches: dict[K, V] = {}

        for key, value in self.__elements.items():
            target = matches if predicate(key, value) else non_matches
            target[key] = value

        return self.__from_items(matches.items()), self.__from_items(non_matches.items())

    @override
    def index_of(self, element: V) -> K | None:
        for key, value in self.__elements.items():
            if value == element:
                return key

        return None

    def __entry(self) -> tuple[K, V] | None:
        if not 0 <= self.__position < len(self.__elements):
            return None

        if self.__entries is None:
            self.__entries = tuple(self.__elements.items())

        return self.__entries[self.__position]

    @staticmethod
    def __is_index(key: Any) -> bool:
        return isinstance(key, int) and not isinstance(key, bool)

    @classmethod
    def __from_items[L: Hashable, U](
        cls,
        items: Iterable[tuple[L, U]],
    ) -> "ArrayCollection[L, U]":
        return cls(dict(items))  # type: ignore[return-value]
