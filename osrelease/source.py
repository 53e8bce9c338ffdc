import logging
from collections.abc import Sequence
from pathlib import Path

from .exceptions import NotFound, ReadError

log = logging.getLogger(__name__)

#: Where os-release is looked for, in order of preference. See
#: https://www.freedesktop.org/software/systemd/man/os-release.html
DEFAULT_SEARCH_PATHS: tuple[Path, ...] = (
    Path("/etc/os-release"),
    Path("/usr/lib/os-release"),
)


def reroot(path: Path, root: Path | None) -> Path:
    """
    Anchor an absolute path under root, if a root is given
    """
    if root is None:
        return path
    return root / path.relative_to(path.anchor)


def _read(path: Path) -> str:
    """
    Read the contents of path.

    Let FileNotFoundError and NotADirectoryError through, turn every other
    failure into ReadError.
    """
    try:
        with path.open("rt", encoding="utf-8") as fd:
            return fd.read()
    except (FileNotFoundError, NotADirectoryError):
        raise
    except OSError as e:
        raise ReadError(f"{path}: cannot read os-release file: {e.strerror or e}", [path]) from e
    except UnicodeDecodeError as e:
        raise ReadError(f"{path}: os-release file is not valid UTF-8: {e}", [path]) from e


def read_source(
    search_paths: Sequence[Path] = DEFAULT_SEARCH_PATHS, root: Path | None = None
) -> tuple[Path, str]:
    """
    Read the first os-release file found in search_paths.

    :arg search_paths: candidate paths, tried in order
    :arg root: if set, candidates are looked up under this directory instead
               of under /
    :returns: the path that was read, and its contents
    :raises NotFound: if none of the candidates exists
    :raises ReadError: if a candidate exists but cannot be read
    """
    tried: list[Path] = []
    for candidate in search_paths:
        path = reroot(Path(candidate), root)
        tried.append(path)
        try:
            contents = _read(path)
        except (FileNotFoundError, NotADirectoryError):
            log.debug("%s: not found", path)
            continue
        log.debug("%s: os-release file found", path)
        return path, contents

    if not tried:
        raise NotFound("no os-release search paths configured")
    raise NotFound(f"os-release file not found. Tried: {', '.join(str(p) for p in tried)}", tried)


def find_source(search_paths: Sequence[Path] = DEFAULT_SEARCH_PATHS, root: Path | None = None) -> Path:
    """
    Return the first os-release file in search_paths that can be opened for
    reading.
    """
    path, _ = read_source(search_paths, root)
    return path
