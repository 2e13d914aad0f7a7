"""Searching road records by link id, class, branch count or name."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from .record import RoadRecord


class SearchKey(IntEnum):
    """The field a search compares against."""

    NAME = 0
    LINK_ID = 1
    CLASS = 2
    BRANCH = 3


def binary_search(records: Sequence[RoadRecord], link_id: int) -> int | None:
    """Index of a record with ``link_id`` in records sorted by link id, or None."""
    left, right = 0, len(records) - 1
    while left <= right:
        middle = (left + right) // 2
        current = records[middle].link_id
        if current == link_id:
            return middle
        if current < link_id:
            left = middle + 1
        else:
            right = middle - 1
    return None


def binary_search_records(records: Sequence[RoadRecord], link_id: int) -> list[RoadRecord]:
    """The record found by binary search, as a list of at most one."""
    position = binary_search(records, link_id)
    return [] if position is None else [records[position]]


def order_search(records: Sequence[RoadRecord], key: SearchKey, value) -> list[RoadRecord]:
    """Every record whose ``key`` field equals ``value``, in their order."""
    key = SearchKey(key)
    if key is SearchKey.NAME:
        return name_search(records, str(value))
    field_of = {
        SearchKey.LINK_ID: lambda record: record.link_id,
        SearchKey.CLASS: lambda record: record.number,
        SearchKey.BRANCH: lambda record: record.branch,
    }[key]
    return [record for record in records if field_of(record) == value]


def name_search(records: Sequence[RoadRecord], text: str) -> list[RoadRecord]:
    """Every record whose name contains ``text``."""
    return [record for record in records if text in record.name]