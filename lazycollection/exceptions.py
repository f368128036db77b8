from typing import Any

__all__ = (
    "CollectionError",
    "NoSuchKey",
)


class CollectionError(Exception): ...


class NoSuchKey[K](KeyError, CollectionError):
    __slots__ = ("__key",)

    __key: K

    def __init__(self, key: K | Any) -> None:
        super().__init__(f"No element for key `{key!r}`.")
        self.__key = key

    @property
    def key(self) -> K:
        return self.__key
