"""Editing a record collection and writing it back to disk."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from .record import DEFAULT_ENCODING, RoadRecord
from .search import binary_search


class RecordNotFoundError(LookupError):
    """No record with the requested link id exists."""

    def __init__(self, link_id: int) -> None:
        super().__init__(f"no record with link id {link_id}")
        self.link_id = link_id


def _locate(records, link_id: int) -> int:
    position = binary_search(records, link_id)
    if position is None:
        raise RecordNotFoundError(link_id)
    return position


def delete_record(records, link_id: int) -> RoadRecord:
    """Remove the record with ``link_id`` from link-id-sorted records and return it."""
    position = _locate(records, link_id)
    removed = records[position]
    del records[position]
    return removed


def replace_record(records, link_id: int, record: RoadRecord) -> RoadRecord:
    """Put ``record`` where the record with ``link_id`` was; return the old one."""
    position = _locate(records, link_id)
    previous = records[position]
    records[position] = record
    return previous


def append_record(records, record: RoadRecord) -> None:
    records.append(record)


def write_records(records, path: str | PathLike[str], encoding: str = DEFAULT_ENCODING) -> None:
    """Write the records to ``path`` in the binary format, replacing the file."""
    with Path(path).open("wb") as stream:
        for record in records:
            stream.write(record.to_bytes(encoding))