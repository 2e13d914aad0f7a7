"""An ordered collection of road records backed by a binary file."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

from .record import DEFAULT_ENCODING, RoadRecord


class RoadStorage:
    """A list of road records that loads from and saves to the binary format."""

    def __init__(self, records: Iterable[RoadRecord] | None = None) -> None:
        self._records: list[RoadRecord] = list(records) if records is not None else []

    @classmethod
    def from_bytes(cls, data: bytes, encoding: str = DEFAULT_ENCODING) -> RoadStorage:
        """Decode every record in ``data``, one after another."""
        records = []
        offset = 0
        while offset < len(data):
            record, offset = RoadRecord.from_bytes(data, offset, encoding)
            records.append(record)
        return cls(records)

    @classmethod
    def load(cls, path: str | PathLike[str], encoding: str = DEFAULT_ENCODING) -> RoadStorage:
        """Read all records from a file."""
        return cls.from_bytes(Path(path).read_bytes(), encoding)

    def to_bytes(self, encoding: str = DEFAULT_ENCODING) -> bytes:
        return b"".join(record.to_bytes(encoding) for record in self._records)

    def save(self, path: str | PathLike[str], encoding: str = DEFAULT_ENCODING) -> None:
        """Write all records to a file, replacing its contents."""
        Path(path).write_bytes(self.to_bytes(encoding))

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index):
        return self._records[index]

    def __setitem__(self, index, record) -> None:
        self._records[index] = record

    def __delitem__(self, index) -> None:
        """Remove the record at ``index``, or every record a slice selects."""
        if isinstance(index, slice):
            removed = set(range(*index.indices(len(self._records))))
            self._records = [
                record
                for position, record in enumerate(self._records)
                if position not in removed
            ]
        else:
            self._records.pop(index)

    def __iter__(self) -> Iterator[RoadRecord]:
        return iter(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RoadStorage):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        return f"RoadStorage({self._records!r})"

    def append(self, record: RoadRecord) -> None:
        self._records.append(record)

    def copy(self) -> RoadStorage:
        """A new storage holding the same records in a separate list."""
        return RoadStorage(self._records)

    def lines(self) -> list[str]:
        """The display line of every record, in order."""
        return [record.display() for record in self._records]