"""Command line front end: show, sort, search and edit a road record file."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .record import DEFAULT_ENCODING, RoadRecord
from .search import SearchKey, binary_search_records, order_search
from .sorting import SortAlgorithm, count_sort
from .storage import RoadStorage
from .update import RecordNotFoundError, append_record, delete_record, replace_record, write_records

NOT_FOUND_LINE = "--------------------------------没找到------------------------------------"
RESULT_HEADER = "-----------------------------------------------------\n排序结果："

_ALGORITHM_NAMES = {algorithm.name.lower(): algorithm for algorithm in SortAlgorithm}
_SEARCH_KEYS = {
    "name": SearchKey.NAME,
    "link": SearchKey.LINK_ID,
    "class": SearchKey.CLASS,
    "branch": SearchKey.BRANCH,
}


@dataclass(frozen=True)
class SortTiming:
    """How long one algorithm took to sort the records."""

    algorithm: SortAlgorithm
    seconds: float

    @property
    def label(self) -> str:
        return f"{self.algorithm.value}运行时间：  {self.seconds:.10g} s"


def time_sorts(
    records: Iterable[RoadRecord], algorithms: Iterable[SortAlgorithm]
) -> tuple[list[SortTiming], RoadStorage]:
    """Sort a fresh copy of ``records`` with each algorithm and time it.

    Returns the timings in the order given and the last sorted copy; with no
    algorithms the copy keeps the original order.
    """
    source = list(records)
    result = RoadStorage(source)
    timings = []
    for algorithm in algorithms:
        algorithm = SortAlgorithm(algorithm)
        working = RoadStorage(source)
        start = time.process_time()
        algorithm.sort(working)
        timings.append(SortTiming(algorithm, time.process_time() - start))
        result = working
    return timings, result


def _ranged(low: int, high: int):
    def parse(text: str) -> int:
        value = int(text)
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(f"must be between {low} and {high}")
        return value

    return parse


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roadrecords", description="Manage electronic map road records."
    )
    parser.add_argument("--encoding", default=DEFAULT_ENCODING, help="encoding of road names")
    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="list every record in a file")
    show.add_argument("file")

    sort = commands.add_parser("sort", help="time sorting algorithms and show the result")
    sort.add_argument("file")
    sort.add_argument(
        "-a", "--algorithm", action="append", choices=sorted(_ALGORITHM_NAMES),
        help="algorithm to run; may be repeated (default: all)",
    )
    sort.add_argument("--write", action="store_true", help="save the sorted records to the file")

    search = commands.add_parser("search", help="find records")
    search.add_argument("file")
    search.add_argument("value")
    search.add_argument("--by", choices=sorted(_SEARCH_KEYS), default="link")
    search.add_argument("--method", choices=("order", "binary"), default="order")

    delete = commands.add_parser("delete", help="remove the record with a link id")
    delete.add_argument("file")
    delete.add_argument("link_id", type=int)

    for name, text in (("add", "append a new record"), ("modify", "replace a record")):
        command = commands.add_parser(name, help=text)
        command.add_argument("file")
        command.add_argument("link_id", type=int)
        command.add_argument("--branch", type=_ranged(0, 7), default=0)
        command.add_argument("--class", dest="number", type=_ranged(0, 15), default=0)
        command.add_argument("--name", default="")
        if name == "modify":
            command.add_argument("--new-link-id", type=int, help="link id of the replacement")
    return parser


def _sorted_storage(path: str, encoding: str) -> RoadStorage:
    storage = RoadStorage.load(path, encoding)
    count_sort(storage)
    return storage


def _run_sort(args) -> int:
    names = args.algorithm or list(_ALGORITHM_NAMES)
    storage = RoadStorage.load(args.file, args.encoding)
    timings, result = time_sorts(storage, (_ALGORITHM_NAMES[name] for name in names))
    for timing in timings:
        print(timing.label)
    print(RESULT_HEADER)
    print("".join(result.lines()), end="")
    if args.write:
        result.save(args.file, args.encoding)
    return 0


def _run_search(args, parser: argparse.ArgumentParser) -> int:
    key = _SEARCH_KEYS[args.by]
    if args.method == "binary" and key is not SearchKey.LINK_ID:
        parser.error("binary search works on link ids only")
    value: object = args.value
    if key is not SearchKey.NAME:
        try:
            value = int(args.value)
        except ValueError:
            parser.error(f"search value must be an integer: {args.value!r}")
    storage = _sorted_storage(args.file, args.encoding)
    if args.method == "binary":
        found = binary_search_records(storage, value)  # type: ignore[arg-type]
    else:
        found = order_search(storage, key, value)
    if not found:
        print(NOT_FOUND_LINE)
    print("".join(record.display() for record in found), end="")
    return 0


def _run_edit(args) -> int:
    storage = _sorted_storage(args.file, args.encoding)
    if args.command == "delete":
        removed = delete_record(storage, args.link_id)
        print(f"deleted record {removed.link_id}")
    elif args.command == "add":
        append_record(storage, RoadRecord(True, args.branch, args.number, args.link_id, args.name))
        print(f"added record {args.link_id}")
    else:
        new_id = args.link_id if args.new_link_id is None else args.new_link_id
        replace_record(
            storage, args.link_id, RoadRecord(True, args.branch, args.number, new_id, args.name)
        )
        print(f"modified record {args.link_id}")
    write_records(storage, args.file, args.encoding)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "show":
            storage = RoadStorage.load(args.file, args.encoding)
            print("".join(storage.lines()), end="")
            return 0
        if args.command == "sort":
            return _run_sort(args)
        if args.command == "search":
            return _run_search(args, parser)
        return _run_edit(args)
    except RecordNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except (OSError, ValueError, LookupError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())