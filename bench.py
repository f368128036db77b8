from collections.abc import Callable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from statistics import mean
from timeit import timeit
from typing import Annotated, Any, ClassVar, Self

from tabulate import tabulate
from typer import Option, Typer

from lazycollection import ArrayCollection, Collection, LazyCollection


@dataclass(frozen=True, slots=True)
class Benchmark:
    x: Decimal
    y: Decimal

    @property
    def difference_rate(self) -> Decimal:
        return ((self.y - self.x) / self.x) * 100

    @classmethod
    def compare(
        cls,
        x: Callable[..., Any],
        y: Callable[..., Any],
        number: int = 1,
    ) -> Self:
        x = mean(cls._time_in_ns(x, number))
        y = mean(cls._time_in_ns(y, number))
        return cls(x, y)

    @staticmethod
    def _time_in_ns(callable_: Callable[..., Any], number: int) -> Iterator[Decimal]:
        for _ in range(number):
            delta = timeit(callable_, number=1)
            yield Decimal(delta) * (10**6)


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    title: str
    benchmark: Benchmark

    @property
    def row(self) -> tuple[str, str, str, str]:
        rate = self.benchmark.difference_rate
        return (
            self.title,
            f"{self.benchmark.x:.2f}μs",
            f"{self.benchmark.y:.2f}μs",
            f"{rate:.2f}% slower" if rate >= 0 else f"{abs(rate):.2f}% faster",
        )


@dataclass(frozen=True, slots=True)
class LazyCollectionBenchmark:
    size: int
    operations: ClassVar[dict[str, Callable[[Collection[int, int]], Any]]] = {}

    def start(self, number: int = 1) -> Iterator[BenchmarkResult]:
        for title, operation in self.operations.items():
            first = Benchmark.compare(
                lambda: operation(self.build()),
                lambda: operation(LazyCollection(self.build)),
                number,
            )
            yield BenchmarkResult(f"{title} (first run)", first)

            reference = self.build()
            lazy = LazyCollection(self.build)
            lazy.initialize()
            instance = Benchmark.compare(
                lambda: operation(reference),
                lambda: operation(lazy),
                number,
            )
            yield BenchmarkResult(title, instance)

    def build(self) -> ArrayCollection[int, int]:
        return ArrayCollection(range(self.size))

    @classmethod
    def register(cls, wrapped: Callable[..., Any] = None, /, *, title: str):
        def decorator(wp):
            cls.operations[title] = wp
            return wp

        return decorator(wrapped) if wrapped else decorator


@LazyCollectionBenchmark.register(title="count")
def count(collection: Collection[int, int]):
    return collection.count()


@LazyCollectionBenchmark.register(title="get")
def get(collection: Collection[int, int]):
    return collection.get(0)


@LazyCollectionBenchmark.register(title="contains")
def contains(collection: Collection[int, int]):
    return collection.contains(-1)


@LazyCollectionBenchmark.register(title="iteration")
def iteration(collection: Collection[int, int]):
    for _ in collection:
        pass


@LazyCollectionBenchmark.register(title="filter")
def filter_even(collection: Collection[int, int]):
    return collection.filter(lambda _, value: value % 2 == 0)


cli = Typer()


@cli.command()
def main(
    number: Annotated[int, Option("--number", "-n", min=1)] = 1000,
    size: Annotated[int, Option("--size", "-s", min=0)] = 100,
):
    results = LazyCollectionBenchmark(size).start(number)
    headers = ("", "Reference Time (μs)", "Lazy Time (μs)", "Difference Rate (%)")
    data = (result.row for result in results)
    table = tabulate(data, headers=headers)
    print(table)


if __name__ == "__main__":
    cli()
