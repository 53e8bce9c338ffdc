from collections.abc import Iterable
from pathlib import Path


class OsReleaseError(Exception):
    """
    Base class for errors locating or reading an os-release file
    """

    def __init__(self, message: str, paths: Iterable[Path] = ()) -> None:
        super().__init__(message)
        self.paths: tuple[Path, ...] = tuple(paths)


class NotFound(OsReleaseError):
    """
    No os-release file exists in any of the places where it was looked for
    """


class ReadError(OsReleaseError):
    """
    An os-release file exists, but it could not be read
    """


class Fail(BaseException):
    """
    Failure that causes the program to exit with an error message.

    No stack trace is printed.
    """


class Success(BaseException):
    """
    Cause the program to exit successfully
    """
