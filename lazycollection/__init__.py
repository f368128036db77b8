from ._core.array import ArrayCollection
from ._core.collection import Collection
from ._core.common.event import Event, EventListener
from ._core.lazy import (
    AbstractLazyCollection,
    CollectionInitialized,
    LazyCollection,
    lazy_collection,
)

__all__ = (
    "AbstractLazyCollection",
    "ArrayCollection",
    "Collection",
    "CollectionInitialized",
    "Event",
    "EventListener",
    "LazyCollection",
    "lazy_collection",
)
