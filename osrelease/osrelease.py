import dataclasses
import functools
import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any, ClassVar, Self, override

from .exceptions import NotFound, ReadError
from .source import DEFAULT_SEARCH_PATHS, read_source
from .utils.parse import parse_osrelease_contents

log = logging.getLogger(__name__)


class ExtraFields(Mapping[str, str]):
    """
    Read-only mapping of the os-release keys without a dedicated attribute
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> None:
        self._fields: dict[str, str] = dict(fields)

    @override
    def __getitem__(self, key: str) -> str:
        return self._fields[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    @override
    def __len__(self) -> int:
        return len(self._fields)

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._fields!r})"

    # Rebuild from a plain dict, so copy, deepcopy, pickle and
    # dataclasses.asdict work
    @override
    def __reduce__(self) -> tuple[type[Self], tuple[dict[str, str]]]:
        return self.__class__, (dict(self._fields),)


@dataclasses.dataclass(frozen=True)
class OsRelease:
    """
    Operating system identification, as found in an os-release file.

    See https://www.freedesktop.org/software/systemd/man/os-release.html

    Well-known keys are mapped to attributes, which are empty when the key
    is missing. All other keys are kept in ``extra``. ``defined`` records
    which keys appeared in the file, to tell a missing key from an empty one.
    """

    #: Name of the OS, without version. Example: ``Ubuntu``
    name: str = ""
    #: Lowercase identifier of the OS. Example: ``ubuntu``
    id: str = ""
    #: Space-separated identifiers of related OSes. Example: ``debian``
    id_like: str = ""
    #: Version, possibly with release details. Example: ``18.04 LTS (Bionic Beaver)``
    version: str = ""
    #: Short version. Example: ``18.04``
    version_id: str = ""
    #: Release codename. Example: ``bionic``
    version_codename: str = ""
    #: Name and version for display. Example: ``Ubuntu 18.04 LTS``
    pretty_name: str = ""
    #: Suggested ANSI color for the OS name. Example: ``0;31``
    ansi_color: str = ""
    home_url: str = ""
    support_url: str = ""
    bug_report_url: str = ""
    privacy_policy_url: str = ""
    build_id: str = ""
    #: Keys not mapped to an attribute
    extra: ExtraFields = dataclasses.field(default_factory=ExtraFields, hash=False)
    #: All keys that were present in the source
    defined: frozenset[str] = frozenset()

    #: Map os-release keys to attribute names
    KEYS: ClassVar[dict[str, str]] = {
        "NAME": "name",
        "ID": "id",
        "ID_LIKE": "id_like",
        "VERSION": "version",
        "VERSION_ID": "version_id",
        "VERSION_CODENAME": "version_codename",
        "PRETTY_NAME": "pretty_name",
        "ANSI_COLOR": "ansi_color",
        "HOME_URL": "home_url",
        "SUPPORT_URL": "support_url",
        "BUG_REPORT_URL": "bug_report_url",
        "PRIVACY_POLICY_URL": "privacy_policy_url",
        "BUILD_ID": "build_id",
    }

    def __post_init__(self) -> None:
        # Take a private copy of a caller-provided dict
        if not isinstance(self.extra, ExtraFields):
            object.__setattr__(self, "extra", ExtraFields(self.extra))

    @classmethod
    def from_dict(cls, info: Mapping[str, str]) -> Self:
        """
        Build an OsRelease from already parsed key/value pairs
        """
        kwargs: dict[str, Any] = {}
        extra: dict[str, str] = {}
        for key, value in info.items():
            if (attr := cls.KEYS.get(key)) is not None:
                kwargs[attr] = value
            else:
                extra[key] = value
        return cls(extra=ExtraFields(extra), defined=frozenset(info), **kwargs)

    @classmethod
    def from_contents(cls, contents: str) -> Self:
        """
        Parse the text of an os-release file
        """
        return cls.from_dict(parse_osrelease_contents(contents))

    @classmethod
    def from_path(cls, path: Path) -> Self:
        """
        Parse the os-release file at the given path.

        :raises NotFound: if the file does not exist
        :raises ReadError: if the file exists but cannot be read
        """
        _, contents = read_source([path])
        return cls.from_contents(contents)

    @classmethod
    def load(cls, search_paths: Sequence[Path] = DEFAULT_SEARCH_PATHS, root: Path | None = None) -> Self:
        """
        Parse the first os-release file found in search_paths.

        :arg root: look for search_paths under this directory instead of /
        :raises NotFound: if none of the candidates exists
        :raises ReadError: if a candidate exists but cannot be read
        """
        _, contents = read_source(search_paths, root)
        return cls.from_contents(contents)

    def is_defined(self, key: str) -> bool:
        """
        Check if the key was present in the source, even with an empty value
        """
        return key in self.defined

    def get(self, key: str, default: str = "") -> str:
        """
        Look up a value by os-release key name, like ``ID`` or ``VARIANT``
        """
        if key not in self.defined:
            return default
        if (attr := self.KEYS.get(key)) is not None:
            return getattr(self, attr)
        return self.extra[key]

    @property
    def id_like_list(self) -> list[str]:
        return self.id_like.split()

    def items(self, include_missing: bool = False) -> Iterator[tuple[str, str]]:
        """
        Generate (key, value) for well-known keys followed by extra keys.

        :arg include_missing: also list well-known keys missing from the source
        """
        for key, attr in self.KEYS.items():
            if include_missing or key in self.defined:
                yield key, getattr(self, attr)
        for key in sorted(self.extra):
            yield key, self.extra[key]

    def as_dict(self) -> dict[str, str]:
        """
        Return the defined keys as a dict, keyed by os-release name
        """
        return dict(self.items())


@functools.cache
def system() -> OsRelease:
    """
    Return the OsRelease of the running system.

    The file is read only the first time: errors are not cached, and are
    raised again on the next call.
    """
    try:
        return OsRelease.load()
    except (NotFound, ReadError) as e:
        log.debug("cannot identify the running system: %s", e)
        raise
