import argparse
import logging
from pathlib import Path
from typing import Any, override

from ..config import OsReleaseConfig, expand_path
from ..osrelease import OsRelease
from .base import Command

log = logging.getLogger(__name__)


MAIN_COMMANDS: list[type[Command]] = []


def main_command(cls: type[Command]) -> type[Command]:
    """
    Decorator used to register a Command class as a main osrelease command
    """
    MAIN_COMMANDS.append(cls)
    return cls


class OsReleaseCommand(Command):
    """
    Base class for commands that read an os-release file
    """

    @override
    @classmethod
    def make_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        parser = super().make_subparser(subparsers)
        parser.add_argument(
            "-f",
            "--file",
            action="store",
            type=Path,
            help="os-release file to read. Default: look for it in the configured search paths",
        )
        parser.add_argument(
            "--root",
            action="store",
            type=Path,
            help="look for os-release files inside this directory instead of /."
            " Default: from configuration file, or /",
        )
        parser.add_argument(
            "-C",
            "--config",
            action="store",
            type=Path,
            help="path to the osrelease config file to use. By default,"
            " look in ~/.config/osrelease/osrelease.yaml and /etc/osrelease.yaml",
        )
        return parser

    def __init__(self, args: argparse.Namespace) -> None:
        super().__init__(args)

        # Load config
        if self.args.config:
            self.config = OsReleaseConfig.load(self.args.config)
        else:
            self.config = OsReleaseConfig.load()

        self.setup_config(self.config)

    def setup_config(self, config: OsReleaseConfig) -> None:
        """
        Customize configuration from command line arguments
        """
        if root := expand_path(self.args.root):
            config.root = root

    def load(self) -> OsRelease:
        """
        Read the os-release file selected by command line and configuration
        """
        if self.args.file:
            log.info("%s: reading os-release file", self.args.file)
            return OsRelease.from_path(self.args.file)
        return OsRelease.load(self.config.search_paths, root=self.config.root)
