import argparse
import inspect
import logging
import sys
from collections.abc import Callable
from typing import Any, ClassVar, Never

try:
    import coloredlogs

    HAS_COLOREDLOGS = True
except ModuleNotFoundError:
    HAS_COLOREDLOGS = False

from ..exceptions import Fail, OsReleaseError, Success

LOG_FORMAT = "%(asctime)-15s %(levelname)s %(name)s %(message)s"


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Log to stderr: warnings by default, info with verbose, everything with
    debug
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    if HAS_COLOREDLOGS:
        coloredlogs.install(level=level, fmt=LOG_FORMAT)
    else:
        logging.basicConfig(level=level, stream=sys.stderr, format=LOG_FORMAT)


class Command:
    """
    A subcommand of osrelease-info.

    The subcommand is called NAME, or the lowercased class name, and the
    first docstring line is its help. run() does the work and returns the
    exit code; it can also raise Fail, Success, or an OsReleaseError.
    """

    NAME: ClassVar[str | None] = None

    def __init__(self, args: argparse.Namespace) -> None:
        self.args = args
        setup_logging(verbose=args.verbose, debug=args.debug)

    @classmethod
    def command_name(cls) -> str:
        return cls.NAME or cls.__name__.lower()

    @classmethod
    def make_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        doc = inspect.getdoc(cls)
        parser: argparse.ArgumentParser = subparsers.add_parser(
            cls.command_name(), help=doc.splitlines()[0] if doc else None
        )
        parser.set_defaults(handler=cls)
        return parser

    def run(self) -> int | None:
        raise NotImplementedError(f"{self.__class__.__name__}.run() not implemented")


def run_main(func: Callable[[], int | None]) -> Never:
    """
    Run the command line main function and exit with its result.

    Errors reading os-release files and Fail exit with status 1, printing
    only the message.
    """
    try:
        status = func()
    except Success:
        status = 0
    except (Fail, OsReleaseError) as e:
        print(e, file=sys.stderr)
        status = 1
    sys.exit(status)
