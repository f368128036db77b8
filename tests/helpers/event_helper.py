from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Self

from lazycollection import AbstractLazyCollection, Event, EventListener
from lazycollection._core.lazy import CollectionEvent


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class EventHistory(EventListener):
    __history: list[Event] = field(default_factory=list, init=False)

    def __iter__(self) -> Iterator[Event]:
        yield from self.__history

    def __len__(self) -> int:
        return len(self.__history)

    @property
    def collections(self) -> Iterator[AbstractLazyCollection[Any, Any]]:
        for event in self.__history:
            if isinstance(event, CollectionEvent):
                yield event.collection

    def assert_length(self, length: int):
        assert len(self) == length

    def clear(self) -> Self:
        self.__history.clear()
        return self

    @contextmanager
    def on_event(self, event: Event, /):
        yield
        self.__history.append(event)
