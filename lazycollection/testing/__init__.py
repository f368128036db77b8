from collections.abc import Callable, Hashable
from dataclasses import dataclass, field

from lazycollection import Collection

__all__ = ("CountingFactory",)


@dataclass(repr=False, eq=False, slots=True)
class CountingFactory[K: Hashable, V]:
    factory: Callable[[], Collection[K, V]]
    calls: int = field(default=0, init=False)

    def __call__(self) -> Collection[K, V]:
        self.calls += 1
        return self.factory()

    def assert_calls(self, calls: int) -> None:
        assert self.calls == calls, f"Expected {calls} call(s), got {self.calls}."
