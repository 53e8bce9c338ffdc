from collections.abc import Iterable, Iterator

QUOTES = ("'", '"')


def unquote(value: str) -> str:
    """
    Strip one pair of matching quotes wrapping the whole value.

    Anything else, including unbalanced or mismatched quotes, is returned
    as it is.
    """
    value = value.strip()
    if len(value) >= 2 and value[0] in QUOTES and value[0] == value[-1]:
        return value[1:-1]
    return value


def iter_assigns(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    """
    Generate (key, value) pairs from os-release lines, in file order.

    Blank lines, comments and lines without ``=`` are skipped.
    """
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        yield key, unquote(value)


def parse_osrelease_contents(contents: str) -> dict[str, str]:
    """
    Parse the contents of an os-release file into a dict.

    If a key is assigned more than once, the last assignment wins.
    """
    return dict(iter_assigns(contents.split("\n")))
