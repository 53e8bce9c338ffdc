import csv
import logging
import shutil
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

try:
    from texttable import Texttable

    HAVE_TEXTTABLE = True
except ModuleNotFoundError:
    HAVE_TEXTTABLE = False

from ..exceptions import Fail, NotFound, ReadError
from ..source import read_source, reroot
from .osrelease import OsReleaseCommand, main_command

log = logging.getLogger(__name__)


def write_csv(out: TextIO, rows: Iterable[Sequence[str]]) -> None:
    csv.writer(out).writerows(rows)


def write_table(out: TextIO, header: Sequence[str], rows: Iterable[Sequence[str]]) -> None:
    """
    Write rows as a text table sized to the terminal
    """
    table = Texttable(max_width=shutil.get_terminal_size().columns)
    table.set_deco(Texttable.HEADER)
    table.set_cols_dtype(["t"] * len(header))
    table.set_cols_align(["l"] * len(header))
    table.set_header_align(["l"] * len(header))
    table.header(header)
    table.add_rows(rows, header=False)
    print(table.draw(), file=out)


@main_command
class Show(OsReleaseCommand):
    """
    Show the contents of the os-release file
    """

    @classmethod
    def make_subparser(cls, subparsers):
        parser = super().make_subparser(subparsers)
        parser.add_argument("--csv", action="store_true", help="machine readable output in CSV format")
        parser.add_argument("--all", action="store_true", help="also list well-known keys that are not set")
        parser.add_argument("--repr", action="store_true", help="print the parsed record, for debugging")
        return parser

    def run(self) -> None:
        info = self.load()

        if self.args.repr:
            print(repr(info))
            return

        rows = list(info.items(include_missing=self.args.all))
        if self.args.csv or not HAVE_TEXTTABLE:
            write_csv(sys.stdout, rows)
        else:
            write_table(sys.stdout, ("Key", "Value"), rows)


@main_command
class Get(OsReleaseCommand):
    """
    Print the values of os-release keys, one per line
    """

    @classmethod
    def make_subparser(cls, subparsers):
        parser = super().make_subparser(subparsers)
        parser.add_argument("keys", nargs="+", metavar="key", help="os-release key to print, like ID or VERSION_ID")
        parser.add_argument(
            "--default", action="store", help="print this value for keys that are not set, instead of failing"
        )
        return parser

    def run(self) -> None:
        info = self.load()
        for key in self.args.keys:
            if info.is_defined(key):
                print(info.get(key))
            elif self.args.default is not None:
                print(self.args.default)
            else:
                raise Fail(f"{key}: key not found in os-release file")


@main_command
class Paths(OsReleaseCommand):
    """
    List where os-release files are looked for, marking the one in use
    """

    def run(self) -> int:
        if self.args.file:
            candidates, root = [self.args.file], None
        else:
            candidates, root = self.config.search_paths, self.config.root

        used = False
        # Set when the search stops, on the used or on an unreadable file
        resolved = False
        for candidate in candidates:
            path = reroot(candidate, root)
            if resolved:
                print(path)
                continue
            try:
                read_source([path])
            except NotFound:
                print(path)
            except ReadError as e:
                log.info("%s", e)
                print(f"{path} (unreadable)")
                resolved = True
            else:
                print(f"{path} (used)")
                used = resolved = True

        return 0 if used else 1
