"""Commands and the redirection files attached to them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional

from minishell.utils import array_dup


class FileType(Enum):
    """How a redirection file is used."""

    COMMON_FILE_IN = auto()
    COMMON_FILE_OUT = auto()
    HEREDOC_FILE = auto()
    APPEND_FILE = auto()


@dataclass
class RedirectFile:
    """A file a command reads from or writes to."""

    path: str
    type: FileType
    fd: int = 0


@dataclass
class Command:
    """A command name, its arguments and its redirections."""

    command: str
    args: Optional[list[str]]
    infile: Optional[RedirectFile] = None
    outfile: Optional[RedirectFile] = None

    @classmethod
    def create(
        cls,
        command: str,
        args: Optional[Iterable[str]],
        infile: Optional[RedirectFile] = None,
        outfile: Optional[RedirectFile] = None,
    ) -> "Command":
        """Build a command holding its own copy of ``args``."""
        return cls(command, array_dup(args), infile, outfile)