import pytest

from roadrecords.record import RoadRecord
from roadrecords.storage import RoadStorage


def _records():
    return [
        RoadRecord(flag=True, branch=1, number=2, link_id=30, name="north"),
        RoadRecord(flag=False, branch=0, number=5, link_id=10, name="south"),
        RoadRecord(flag=True, branch=7, number=15, link_id=20, name="长安街"),
    ]


def test_bytes_round_trip():
    storage = RoadStorage(_records())
    assert RoadStorage.from_bytes(storage.to_bytes()) == storage


def test_from_bytes_concatenated_records():
    records = _records()
    data = b"".join(record.to_bytes() for record in records)
    storage = RoadStorage.from_bytes(data)
    assert len(storage) == len(records)
    assert list(storage) == records


def test_empty_data_gives_empty_storage():
    storage = RoadStorage.from_bytes(b"")
    assert len(storage) == 0
    assert storage.to_bytes() == b""


def test_truncated_file_raises():
    data = RoadStorage(_records()).to_bytes()
    with pytest.raises(ValueError):
        RoadStorage.from_bytes(data[:-3])


def test_save_and_load(tmp_path):
    path = tmp_path / "roads.dat"
    storage = RoadStorage(_records())
    storage.save(path)
    loaded = RoadStorage.load(path)
    assert loaded == storage
    assert path.read_bytes() == storage.to_bytes()


def test_indexing_and_mutation():
    records = _records()
    storage = RoadStorage(records)
    assert storage[1] == records[1]
    replacement = RoadRecord(flag=True, branch=0, number=0, link_id=99, name="new")
    storage[1] = replacement
    assert storage[1] == replacement
    del storage[0]
    assert list(storage) == [replacement, records[2]]


def test_append():
    storage = RoadStorage()
    record = _records()[0]
    storage.append(record)
    assert list(storage) == [record]


def test_copy_is_independent():
    storage = RoadStorage(_records())
    duplicate = storage.copy()
    duplicate.append(RoadRecord(flag=True, branch=0, number=0, link_id=1, name="x"))
    del duplicate[0]
    assert len(storage) == len(_records())
    assert list(storage) == _records()


def test_lines_match_display():
    records = _records()
    storage = RoadStorage(records)
    assert storage.lines() == [record.display() for record in records]