import pytest

from lazycollection import ArrayCollection, LazyCollection, lazy_collection
from lazycollection.exceptions import CollectionError
from lazycollection.testing import CountingFactory


class TestLazyCollectionDecorator:
    def test_lazy_collection_with_success(self):
        calls = 0

        @lazy_collection
        def numbers():
            nonlocal calls
            calls += 1
            return ArrayCollection([1, 2, 3])

        assert isinstance(numbers, LazyCollection)
        assert calls == 0
        assert numbers.reduce(lambda carry, value: carry + value, 0) == 6
        assert numbers.last() == 3
        assert calls == 1

    def test_lazy_collection_with_options(self):
        @lazy_collection(thread_safe=False)
        def letters():
            return ArrayCollection({"x": "a"})

        assert isinstance(letters, LazyCollection)
        assert letters.is_initialized is False
        assert letters["x"] == "a"
        assert letters.is_initialized is True


class TestFromItems:
    def test_from_items_consume_iterable_on_first_use(self):
        consumed = []

        def items():
            for key, value in (("a", 1), ("b", 2)):
                consumed.append(key)
                yield key, value

        collection = LazyCollection.from_items(items())
        assert consumed == []

        assert collection.to_dict() == {"a": 1, "b": 2}
        assert consumed == ["a", "b"]
        assert isinstance(~collection, ArrayCollection)

    def test_from_items_with_failed_iterator_raise_on_retry(self):
        def items():
            yield "a", 1
            raise ConnectionError

        collection = LazyCollection.from_items(items())

        with pytest.raises(ConnectionError):
            collection.count()

        with pytest.raises(CollectionError):
            collection.count()

        assert collection.is_initialized is False

    def test_from_items_with_reiterable_retry_from_scratch(self):
        class FlakyItems:
            def __init__(self):
                self.attempts = 0

            def __iter__(self):
                self.attempts += 1
                yield "a", 1

                if self.attempts == 1:
                    raise ConnectionError

                yield "b", 2

        items = FlakyItems()
        collection = LazyCollection.from_items(items)

        with pytest.raises(ConnectionError):
            collection.count()

        assert collection.to_dict() == {"a": 1, "b": 2}
        assert items.attempts == 2


class TestCountingFactory:
    def test_counting_factory_count_calls(self):
        factory = CountingFactory(ArrayCollection)
        factory()
        factory()
        factory.assert_calls(2)

    def test_counting_factory_count_failed_calls(self):
        def fail():
            raise LookupError

        factory = CountingFactory(fail)

        with pytest.raises(LookupError):
            factory()

        factory.assert_calls(1)

    def test_assert_calls_with_wrong_count_raise_assertion_error(self):
        factory = CountingFactory(ArrayCollection)

        with pytest.raises(AssertionError):
            factory.assert_calls(1)
