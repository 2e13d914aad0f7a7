import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from roadrecords.record import RoadRecord
from roadrecords.sorting import (
    SortAlgorithm,
    bubble_sort,
    bucket_sort,
    count_sort,
    heap_sort,
    merge_sort,
    quick_sort,
    shell_sort,
)
from roadrecords.storage import RoadStorage


def make(link_id, name=""):
    return RoadRecord(flag=True, branch=1, number=2, link_id=link_id, name=name)


def make_many(link_ids):
    return [make(link_id, f"road{position}") for position, link_id in enumerate(link_ids)]


def ids(records):
    return [record.link_id for record in records]


ASCENDING_SORTS = [
    bubble_sort,
    bucket_sort,
    count_sort,
    heap_sort,
    shell_sort,
    merge_sort,
    quick_sort,
]

link_id_lists = st.lists(st.integers(min_value=0, max_value=2**32 - 1), max_size=60)
small_id_lists = st.lists(st.integers(min_value=0, max_value=20), max_size=60)


@pytest.mark.parametrize("sort", ASCENDING_SORTS)
@settings(max_examples=60)
@given(link_ids=link_id_lists)
def test_sorts_ascending_and_keeps_records(sort, link_ids):
    records = make_many(link_ids)
    original = list(records)
    sort(records)
    assert ids(records) == sorted(link_ids)
    assert sorted(map(id, records)) == sorted(map(id, original))


@pytest.mark.parametrize("sort", ASCENDING_SORTS)
@settings(max_examples=40)
@given(link_ids=small_id_lists)
def test_sorts_with_many_duplicates(sort, link_ids):
    records = make_many(link_ids)
    sort(records)
    assert ids(records) == sorted(link_ids)
    assert sorted(record.name for record in records) == sorted(
        f"road{position}" for position in range(len(link_ids))
    )


@pytest.mark.parametrize("sort", ASCENDING_SORTS)
def test_empty_and_single(sort):
    empty = []
    sort(empty)
    assert empty == []
    single = [make(7, "only")]
    sort(single)
    assert single == [make(7, "only")]


@pytest.mark.parametrize("sort", [count_sort, bubble_sort])
@settings(max_examples=40)
@given(link_ids=small_id_lists)
def test_stable_sorts_keep_order_of_equal_ids(sort, link_ids):
    records = make_many(link_ids)
    expected = sorted(records, key=lambda record: record.link_id)
    sort(records)
    assert [record.name for record in records] == [record.name for record in expected]


@pytest.mark.parametrize("sort", [shell_sort, merge_sort])
@settings(max_examples=40)
@given(link_ids=link_id_lists)
def test_descending_order(sort, link_ids):
    records = make_many(link_ids)
    sort(records, ascending=False)
    assert ids(records) == sorted(link_ids, reverse=True)


@settings(max_examples=40)
@given(link_ids=link_id_lists)
def test_bucket_sort_descending_is_a_permutation(link_ids):
    records = make_many(link_ids)
    bucket_sort(records, ascending=False)
    assert sorted(ids(records)) == sorted(link_ids)


@pytest.mark.parametrize("algorithm", list(SortAlgorithm))
@settings(max_examples=30)
@given(link_ids=link_id_lists)
def test_algorithm_enum_sorts(algorithm, link_ids):
    records = make_many(link_ids)
    algorithm.sort(records)
    assert ids(records) == sorted(link_ids)


@pytest.mark.parametrize("algorithm", list(SortAlgorithm))
def test_algorithm_sorts_storage_in_place(algorithm):
    storage = RoadStorage(make_many([30, 10, 20, 10, 5]))
    algorithm.sort(storage)
    assert ids(storage) == [5, 10, 10, 20, 30]
    assert len(storage) == 5


def test_algorithm_labels():
    assert SortAlgorithm("HeapSort") is SortAlgorithm.HEAP
    assert SortAlgorithm("HillSort") is SortAlgorithm.SHELL
    assert [member.value for member in SortAlgorithm] == [
        "HeapSort",
        "CountSort",
        "BucketSort",
        "QuickSort",
        "HillSort",
        "BubbleSort",
        "MergeSort",
    ]


def test_quick_sort_already_sorted_large_input():
    records = make_many(range(5000))
    quick_sort(records)
    assert ids(records) == list(range(5000))


def test_quick_sort_reverse_sorted():
    records = make_many(range(300, 0, -1))
    quick_sort(records)
    assert ids(records) == list(range(1, 301))


def test_bucket_sort_extreme_ids():
    link_ids = [2**32 - 1, 0, 2**31, 1, 2**32 - 2]
    records = make_many(link_ids)
    bucket_sort(records)
    assert ids(records) == sorted(link_ids)


def test_count_sort_wide_range():
    link_ids = [4_000_000_000, 3, 4_000_000_000, 0]
    records = make_many(link_ids)
    count_sort(records)
    assert ids(records) == sorted(link_ids)
    assert [record.name for record in records] == ["road3", "road1", "road0", "road2"]