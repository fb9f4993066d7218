import pytest

from mudutils import array
from mudutils.array import ArrayError


def test_range_doc_examples():
    assert array.range(5) == [0, 1, 2, 3, 4]
    assert array.range(1, 4) == [1, 2, 3]
    assert array.range(0, 10, 2) == [0, 2, 4, 6, 8]
    assert array.range(10, 0, -2) == [10, 8, 6, 4, 2]


def test_range_zero_step_raises():
    with pytest.raises(ArrayError, match="Step cannot be zero"):
        array.range(0, 10, 0)


def test_range_wrong_direction_is_empty():
    assert array.range(5, 1) == []
    assert array.range(1, 5, -1) == []


def test_chunk_doc_examples():
    data = [1, 2, 3, 4, 5, 6, 7]
    assert array.chunk(data, 3) == [[1, 2, 3], [4, 5, 6], [7]]
    assert array.chunk(data, 2) == [[1, 2], [3, 4], [5, 6], [7]]


def test_chunk_edge_cases():
    assert array.chunk([1, 2, 3], 0) == []
    assert array.chunk([], 3) == []


def test_chunk_flattens_back():
    data = list(range(17))
    for size in (1, 2, 5, 17, 30):
        chunks = array.chunk(data, size)
        assert array.flat(chunks) == data
        assert all(len(c) <= size for c in chunks)


def test_first_and_last():
    assert array.first([1, 2, 3], 0) == 1
    assert array.first([], 42) == 42
    assert array.last([1, 2, 3], 0) == 3
    assert array.last([], 42) == 42


def test_count_by():
    words = ["apple", "banana", "apricot", "blueberry"]
    assert array.count_by(words, lambda s: s[0]) == {"a": 2, "b": 2}


def test_diff():
    assert array.diff([1, 2, 3, 4], [2, 4, 6], lambda x: x) == [1, 3]
    assert array.diff([1, 2, 3], [], lambda x: x) == [1, 2, 3]


def test_fork():
    evens, odds = array.fork([1, 2, 3, 4, 5, 6], lambda x: x % 2 == 0)
    assert evens == [2, 4, 6]
    assert odds == [1, 3, 5]


def test_max_and_min():
    assert array.max([1, 3, 2]) == 3
    assert array.max([]) is None
    assert array.min([1, 3, 2]) == 1
    assert array.min([]) is None
    people = [("Alice", 25), ("Bob", 30), ("Charlie", 20)]
    assert array.max(people, lambda p: p[1]) == ("Bob", 30)
    assert array.min(people, lambda p: p[1]) == ("Charlie", 20)


def test_max_min_ties():
    pairs = [("x", 1), ("y", 1)]
    assert array.max(pairs, lambda p: p[1]) == ("y", 1)
    assert array.min(pairs, lambda p: p[1]) == ("x", 1)


def test_sum_and_sum_direct():
    items = [("a", 1), ("b", 2), ("c", 3)]
    assert array.sum(items, lambda item: item[1]) == 6
    assert array.sum([1, 2, 3, 4], lambda x: x) == 10
    assert array.sum_direct([1, 2, 3, 4]) == 10
    assert array.sum_direct([1.5, 2.5, 3.0]) == 7.0


def test_unique():
    assert array.unique([1, 2, 2, 3, 1], lambda x: x) == [1, 2, 3]
    people = [("Alice", 25), ("Bob", 30), ("Alice", 35)]
    assert len(array.unique(people, lambda p: p[1])) == 3
    assert array.unique(people, lambda p: p[0]) == [("Alice", 25), ("Bob", 30)]


def test_shuffle_is_permutation():
    original = [1, 2, 3, 4, 5]
    shuffled = array.shuffle(original)
    assert len(shuffled) == len(original)
    assert sorted(shuffled) == original
    assert original == [1, 2, 3, 4, 5]


def test_find_index_and_find():
    data = [1, 2, 3, 4, 5]
    assert array.find_index(data, lambda x: x > 3) == 3
    assert array.find_index(data, lambda x: x > 10) is None
    assert array.find(data, lambda x: x > 3) == 4
    assert array.find(data, lambda x: x > 10) is None


def test_some_and_every():
    data = [1, 2, 3, 4, 5]
    assert array.some(data, lambda x: x > 3)
    assert not array.some(data, lambda x: x > 10)
    evens = [2, 4, 6, 8]
    assert array.every(evens, lambda x: x % 2 == 0)
    assert not array.every(evens, lambda x: x > 5)


def test_filter_map_reduce():
    data = [1, 2, 3, 4, 5]
    assert array.filter(data, lambda x: x % 2 == 0) == [2, 4]
    assert array.map(data, lambda x: x * 2) == [2, 4, 6, 8, 10]
    assert array.reduce(data, 0, lambda acc, x: acc + x) == 15


def test_includes_and_index_of():
    data = [1, 2, 3, 4, 5]
    assert array.includes(data, 3)
    assert not array.includes(data, 10)
    assert array.index_of(data, 3) == 2
    assert array.index_of(data, 10) is None


def test_join():
    words = ["hello", "world", "rust"]
    assert array.join(words, ", ") == "hello, world, rust"
    assert array.join(words, "-") == "hello-world-rust"


def test_reverse_does_not_mutate():
    data = [1, 2, 3, 4, 5]
    assert array.reverse(data) == [5, 4, 3, 2, 1]
    assert data == [1, 2, 3, 4, 5]
    assert array.reverse(array.reverse(data)) == data


def test_slice():
    data = [1, 2, 3, 4, 5]
    assert array.slice(data, 1, 4) == [2, 3, 4]
    assert array.slice(data, 2) == [3, 4, 5]
    assert array.slice(data, 4, 2) == []
    assert array.slice(data, 10) == []
    assert array.slice(data, 0, 100) == data


def test_concat_and_flat():
    assert array.concat([[1, 2], [3, 4], [5, 6]]) == [1, 2, 3, 4, 5, 6]
    assert array.flat([[1, 2], [3, 4], [5]]) == [1, 2, 3, 4, 5]
    assert array.concat([]) == []