from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterable
from contextlib import suppress
from dataclasses import dataclass
from functools import update_wrapper
from logging import Logger
from typing import Any, ContextManager, Self, override

from lazycollection._core.array import ArrayCollection
from lazycollection._core.collection import Collection
from lazycollection._core.common.event import Event, EventChannel, EventListener
from lazycollection._core.common.invertible import Invertible
from lazycollection._core.common.threading import get_lock
from lazycollection.exceptions import CollectionError

"""
Events
"""


@dataclass(frozen=True, slots=True)
class CollectionEvent(Event, ABC):
    collection: AbstractLazyCollection[Any, Any]


@dataclass(frozen=True, slots=True)
class CollectionInitialized(CollectionEvent):
    @override
    def __str__(self) -> str:
        collection = self.collection
        return f"`{type(collection).__name__}@{id(collection):#x}` has been initialized."


"""
Lazy collections
"""


def _forward[T](method: Callable[..., T]) -> Callable[..., T]:
    name = method.__name__

    def wrapper(
        self: AbstractLazyCollection[Any, Any],
        /,
        *args: Any,
        **kwargs: Any,
    ) -> T:
        return getattr(~self, name)(*args, **kwargs)

    return update_wrapper(wrapper, method, updated=())


class AbstractLazyCollection[K: Hashable, V](
    Collection[K, V],
    Invertible[Collection[K, V]],
    ABC,
):
    """
    Collection whose backing collection is built by `_do_initialize` on first use.
    """

    __slots__ = ("_collection", "__channel", "__initialized", "__lock")

    _collection: Collection[K, V]
    __channel: EventChannel
    __initialized: bool
    __lock: ContextManager[Any]

    def __init__(self, *, thread_safe: bool = True) -> None:
        self.__channel = EventChannel()
        self.__initialized = False
        self.__lock = get_lock(thread_safe)

    @override
    def __repr__(self) -> str:
        if not self.__initialized:
            return f"<{type(self).__name__} (uninitialized)>"

        return f"<{type(self).__name__} {self._collection!r}>"

    @override
    def __invert__(self) -> Collection[K, V]:
        self.initialize()
        return self._collection

    @property
    def is_initialized(self) -> bool:
        return self.__initialized

    def initialize(self) -> None:
        if self.__initialized:
            return

        with self.__lock:
            if self.__initialized:
                return

            event = CollectionInitialized(self)

            with self.__channel.dispatch(event):
                try:
                    self._do_initialize()
                except BaseException:
                    with suppress(AttributeError):
                        del self._collection

                    raise

                self.__initialized = True

    @abstractmethod
    def _do_initialize(self) -> None:
        """
        Must assign the backing collection to `self._collection`.
        """

        raise NotImplementedError

    def add_listener(self, listener: EventListener) -> Self:
        self.__channel.add_listener(listener)
        return self

    def remove_listener(self, listener: EventListener) -> Self:
        self.__channel.remove_listener(listener)
        return self

    def add_logger(self, logger: Logger) -> Self:
        self.__channel.add_logger(logger)
        return self

    __len__ = _forward(Collection.__len__)
    __iter__ = _forward(Collection.__iter__)
    __contains__ = _forward(Collection.__contains__)
    __getitem__ = _forward(Collection.__getitem__)
    __setitem__ = _forward(Collection.__setitem__)
    __delitem__ = _forward(Collection.__delitem__)
    count = _forward(Collection.count)
    is_empty = _forward(Collection.is_empty)
    contains = _forward(Collection.contains)
    contains_key = _forward(Collection.contains_key)
    add = _forward(Collection.add)
    remove = _forward(Collection.remove)
    remove_element = _forward(Collection.remove_element)
    clear = _forward(Collection.clear)
    get = _forward(Collection.get)
    set = _forward(Collection.set)
    get_keys = _forward(Collection.get_keys)
    get_values = _forward(Collection.get_values)
    to_dict = _forward(Collection.to_dict)
    slice = _forward(Collection.slice)
    first = _forward(Collection.first)
    last = _forward(Collection.last)
    key = _forward(Collection.key)
    current = _forward(Collection.current)
    next = _forward(Collection.next)
    exists = _forward(Collection.exists)
    for_all = _forward(Collection.for_all)
    find_first = _forward(Collection.find_first)
    filter = _forward(Collection.filter)
    map = _forward(Collection.map)
    reduce = _forward(Collection.reduce)
    partition = _forward(Collection.partition)
    index_of = _forward(Collection.index_of)


class LazyCollection[K: Hashable, V](AbstractLazyCollection[K, V]):
    __slots__ = ("__factory",)

    __factory: Callable[[], Collection[K, V]]

    def __init__(
        self,
        factory: Callable[[], Collection[K, V]],
        /,
        *,
        thread_safe: bool = True,
    ) -> None:
        super().__init__(thread_safe=thread_safe)
        self.__factory = factory

    @override
    def _do_initialize(self) -> None:
        self._collection = self.__factory()

    @classmethod
    def from_items(
        cls,
        items: Iterable[tuple[K, V]],
        /,
        *,
        thread_safe: bool = True,
    ) -> LazyCollection[K, V]:
        attempted = False

        def factory() -> ArrayCollection[K, V]:
            nonlocal attempted

            if attempted and iter(items) is items:
                raise CollectionError(
                    "Items iterator already consumed by a failed initialization."
                )

            attempted = True
            return ArrayCollection(dict(items))

        return cls(factory, thread_safe=thread_safe)


def lazy_collection[K: Hashable, V](  # type: ignore[no-untyped-def]
    wrapped: Callable[[], Collection[K, V]] | None = None,
    /,
    *,
    thread_safe: bool = True,
):
    def decorator(wp):  # type: ignore[no-untyped-def]
        return LazyCollection(wp, thread_safe=thread_safe)

    return decorator(wrapped) if wrapped else decorator
