# roadrecords

Tools for working with electronic-map road record files. The package loads
a binary `.dat` file of road records and sorts it with one of several
classic sorting algorithms. It looks records up by link ID, name, class
number or branch count. It edits the collection and writes it back in the
same binary format.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The record format

Each record in a file is laid out as follows. All integers are big-endian.

| Bytes   | Content                                                     |
|---------|-------------------------------------------------------------|
| 2       | record size in bytes, including this header                 |
| 4       | link ID                                                     |
| 5       | reserved, written as zero                                   |
| 1       | bit 7: flag, bits 4–6: branch count, bits 0–3: class number |
| size-12 | road name, padded with zero bytes                           |

Records follow one another with no separator. Names are encoded with GBK
by default. Every function that reads or writes takes an `encoding`
argument to change this.

When a name is read, it ends at the first zero byte. Bytes that the
encoding cannot decode are replaced. A record read from a file keeps its
original `record_size` when it is written again. A record built in code
gets a size of 12 plus the length of its encoded name.

## Library use

```python
from roadrecords.storage import RoadStorage
from roadrecords.sorting import quick_sort
from roadrecords.search import binary_search, name_search, order_search, SearchKey
from roadrecords.update import delete_record, write_records, RecordNotFoundError

storage = RoadStorage.load("roads.dat", encoding="gbk")
print(len(storage))

records = storage.copy()
quick_sort(records)                       # ascending by link ID, in place

position = binary_search(records, 1234)   # index, or None when absent
for record in name_search(records, "Main"):
    print(record.display(), end="")

for record in order_search(records, SearchKey.CLASS, 3):
    print(record.link_id)

try:
    delete_record(records, 1234)
except RecordNotFoundError:
    print("no such link ID")

write_records(records, "roads.dat", encoding="gbk")
```

### Modules

- `roadrecords.record` provides `RoadRecord`, a dataclass with the fields
  `flag`, `branch`, `number` (the class number), `link_id`, `name` and
  `record_size`.
  - `to_bytes` encodes a record and `RoadRecord.from_bytes(data, offset)`
    decodes one. `from_bytes` returns the record together with the offset
    after it.
  - `display` gives a one-line human-readable summary.
  - Records compare with `<` and `>` by link ID.
- `roadrecords.storage` provides `RoadStorage`, a list-like collection of
  records.
  - `load` / `save` read and write a file, and `from_bytes` / `to_bytes`
    do the same for bytes.
  - It supports indexing, slicing deletion, iteration, `len`, `append` and
    `copy`.
  - `lines` returns the display line of every record.
- `roadrecords.search` provides the following functions:
  - `binary_search` returns the index of a link ID in records sorted by
    link ID, or `None`.
  - `binary_search_records` returns the same result as a list of at most
    one record.
  - `order_search` returns every record whose field selected by
    `SearchKey` (`NAME`, `LINK_ID`, `CLASS`, `BRANCH`) equals a value.
  - `name_search` returns the records whose name contains a substring.
- `roadrecords.update` provides the following functions:
  - `delete_record` and `replace_record` find a record by binary search on
    its link ID. The records must be sorted. They raise
    `RecordNotFoundError` when no record matches.
  - `append_record` adds a record.
  - `write_records` writes records to a file in the binary format.
- `roadrecords.sorting` provides in-place sorts by link ID:
  - `bubble_sort`, `count_sort`, `heap_sort` and `quick_sort`.
  - `shell_sort`, `merge_sort` and `bucket_sort`, which take an
    `ascending` flag. For `bucket_sort` the flag only orders records within
    each of its 600 link-ID ranges.

  `SortAlgorithm` names each algorithm, and its `sort` method runs it.
- `roadrecords.cli` provides `time_sorts`. It sorts a fresh copy of the
  records with each given algorithm. It returns a `SortTiming` (algorithm
  and CPU seconds) per algorithm, together with the last sorted copy.

## Command line

```
roadrecords --help
```

| Command | What it does |
|---------|--------------|
| `roadrecords show FILE` | Lists every record. |
| `roadrecords sort FILE [-a ALGORITHM ...] [--write]` | Times each chosen algorithm, or all of them, then prints the sorted records. `--write` saves the result back to the file. Algorithms: `bubble`, `bucket`, `count`, `heap`, `merge`, `quick`, `shell`. |
| `roadrecords search FILE VALUE [--by name\|link\|class\|branch] [--method order\|binary]` | Finds records. Binary search works on link IDs only. |
| `roadrecords delete FILE LINK_ID` | Removes the record with that link ID. |
| `roadrecords add FILE LINK_ID [--branch N] [--class N] [--name NAME]` | Appends a new record with its flag set. |
| `roadrecords modify FILE LINK_ID [--branch N] [--class N] [--name NAME] [--new-link-id ID]` | Replaces the record with that link ID. |

The `search`, `delete`, `add` and `modify` commands first order the
records by link ID. The editing commands then write the whole file back.
The `--encoding` option, placed before the command, sets the name
encoding. Errors are printed to standard error and the command exits with
status 1.

## What the package does not do

There is no graphical interface. All interaction goes through the library
functions or the `roadrecords` command.