"""A single road record and its fixed binary layout."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

DEFAULT_ENCODING = "gbk"
HEADER_SIZE = 12

# record size, link id, five reserved bytes, flag/branch/class byte
_HEADER = struct.Struct(">HI5xB")


@dataclass
class RoadRecord:
    """One road of the map: its link id, name and attribute bits."""

    flag: bool
    branch: int
    number: int
    link_id: int
    name: str = ""
    record_size: int | None = field(default=None, compare=False)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RoadRecord):
            return NotImplemented
        return self.link_id < other.link_id

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RoadRecord):
            return NotImplemented
        return self.link_id > other.link_id

    def to_bytes(self, encoding: str = DEFAULT_ENCODING) -> bytes:
        """Encode the record; the name is NUL-padded to the record size."""
        encoded = self.name.encode(encoding).split(b"\0", 1)[0]
        size = self.record_size if self.record_size is not None else HEADER_SIZE + len(encoded)
        room = size - HEADER_SIZE
        if len(encoded) > room:
            raise ValueError(
                f"name needs {len(encoded)} bytes but record size {size} leaves {room}"
            )
        attributes = ((0x80 if self.flag else 0) + (self.branch << 4) + self.number) & 0xFF
        try:
            header = _HEADER.pack(size, self.link_id, attributes)
        except struct.error as exc:
            raise ValueError(f"record cannot be encoded: {exc}") from exc
        return header + encoded + bytes(room - len(encoded))

    @classmethod
    def from_bytes(
        cls, data: bytes, offset: int = 0, encoding: str = DEFAULT_ENCODING
    ) -> tuple[RoadRecord, int]:
        """Decode one record at ``offset``; return it with the offset after it."""
        if offset < 0:
            raise ValueError("offset must not be negative")
        if len(data) - offset < HEADER_SIZE:
            raise ValueError(f"truncated record header at offset {offset}")
        size, link_id, attributes = _HEADER.unpack_from(data, offset)
        if size < HEADER_SIZE:
            raise ValueError(f"record size {size} is smaller than the header")
        end = offset + size
        if end > len(data):
            raise ValueError(f"record at offset {offset} runs past the end of the data")
        raw_name = bytes(data[offset + HEADER_SIZE:end]).split(b"\0", 1)[0]
        record = cls(
            flag=bool(attributes & 0x80),
            branch=(attributes & 0x70) >> 4,
            number=attributes & 0x0F,
            link_id=link_id,
            name=raw_name.decode(encoding, errors="replace"),
            record_size=size,
        )
        return record, end

    def display(self) -> str:
        """A one-line human readable description of the record."""
        return (
            "道路名称:" + self.name + (" " if self.flag else " 空     ")
            + "LinkID：" + str(self.link_id) + " "
            + "岔路数：" + str(self.branch) + " "
            + "Class番号：" + str(self.number) + "\n"
        )