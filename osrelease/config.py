from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import overload, Self

import yaml

from .exceptions import Fail
from .source import DEFAULT_SEARCH_PATHS

log = logging.getLogger(__name__)


@overload
def expand_path(path: Path) -> Path: ...
@overload
def expand_path(path: str | None) -> Path | None: ...


def expand_path(path: str | Path | None) -> Path | None:
    """
    Process a path in the configuration, expanding ~ and making it absolute.

    If path is None or empty, return None
    """
    if not path:
        return None
    return Path(path).expanduser().absolute()


class OsReleaseConfig:
    """
    Where to look for os-release files
    """

    def __init__(self) -> None:
        # Candidate os-release files, tried in order
        self.search_paths: list[Path] = list(DEFAULT_SEARCH_PATHS)
        # Directory to use as filesystem root when looking for search_paths,
        # for example an unpacked OS image. Default: /
        self.root: Path | None = None

    @classmethod
    def xdg_local_config_dir(cls) -> Path:
        config_home = Path(os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config")))
        return config_home / "osrelease"

    @classmethod
    def find_config_file(cls) -> Path | None:
        """
        Locate an osrelease.yaml configuration file in a list of well known
        directories
        """
        # Try in the home directory, as ~/.config/osrelease/osrelease.yaml
        local_config = cls.xdg_local_config_dir() / "osrelease.yaml"
        if local_config.exists():
            return local_config

        # Try system-wide, as /etc/osrelease.yaml
        system_config = Path("/etc/osrelease.yaml")
        if system_config.exists():
            return system_config

        return None

    @classmethod
    def load(cls, path: Path | None = None) -> Self:
        """
        Load the configuration from the given path, or from a list of default paths.
        """
        if path is None:
            path = cls.find_config_file()
        if path is None:
            # If no config file is loaded, keep the defaults
            return cls()

        try:
            with path.open() as fd:
                conf = yaml.safe_load(fd)
            log.info("Configuration loaded from %s", path)
        except FileNotFoundError:
            return cls()

        res = cls()
        if conf is None:
            return res
        if not isinstance(conf, dict):
            raise Fail(f"{path}: configuration must be a mapping, not {type(conf).__name__}")

        if "search_paths" in conf:
            search_paths = conf.pop("search_paths")
            if isinstance(search_paths, str):
                search_paths = [search_paths]
            if not isinstance(search_paths, list) or not all(isinstance(p, str) and p for p in search_paths):
                raise Fail(f"{path}: search_paths must be a path or a list of paths, not {search_paths!r}")
            res.search_paths = [expand_path(Path(p)) for p in search_paths]
        if (root := conf.pop("root", None)) is not None:
            if not isinstance(root, str) or not root:
                raise Fail(f"{path}: root must be a path, not {root!r}")
            res.root = expand_path(Path(root))
        for key in conf:
            log.warning("%s: ignoring unknown configuration key %r", path, key)
        return res
