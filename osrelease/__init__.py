from .exceptions import NotFound, OsReleaseError, ReadError
from .osrelease import ExtraFields, OsRelease, system
from .source import DEFAULT_SEARCH_PATHS, find_source, read_source

__all__ = [
    "OsRelease",
    "ExtraFields",
    "system",
    "OsReleaseError",
    "NotFound",
    "ReadError",
    "DEFAULT_SEARCH_PATHS",
    "find_source",
    "read_source",
]
