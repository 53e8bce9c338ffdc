# Import so they can be registered in MAIN_COMMANDS
from . import commands  # noqa
from .base import run_main
from .osrelease import MAIN_COMMANDS

__all__ = ["run_main", "MAIN_COMMANDS"]
