"""Command descriptions parsed from five-field specification strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from pipechain.numbers import atoi
from pipechain.strings import split, strncmp

NULL_WORD = "NULL"
FIELD_COUNT = 5


@dataclass
class Command:
    """One stage of a job: a program, its single argument and redirections."""

    program: str
    arg: str
    eof: Optional[str] = None
    open_fd: int = -1
    append_fd: int = -1

    @property
    def eof_length(self) -> int:
        """Length of the heredoc delimiter, 0 when there is none."""
        return len(self.eof) if self.eof is not None else 0


def optional_field(text: str) -> Optional[str]:
    """None for a field that starts with "NULL", otherwise the field itself."""
    if strncmp(text, NULL_WORD, len(NULL_WORD)) == 0:
        return None
    return text


def optional_int(text: str) -> int:
    """-1 for a field that starts with "NULL", otherwise its integer value."""
    if strncmp(text, NULL_WORD, len(NULL_WORD)) == 0:
        return -1
    return atoi(text)


def parse_command(spec: str) -> Command:
    """Parse "program arg eof open_fd append_fd", fields separated by spaces."""
    fields = split(spec, " ")
    if len(fields) < FIELD_COUNT:
        raise ValueError(
            f"command needs {FIELD_COUNT} space-separated fields, got {len(fields)}: {spec!r}"
        )
    program, arg, eof, open_fd, append_fd = fields[:FIELD_COUNT]
    return Command(
        program=program,
        arg=arg,
        eof=optional_field(eof),
        open_fd=optional_int(open_fd),
        append_fd=optional_int(append_fd),
    )


def parse_job(specs: Iterable[str]) -> list[Command]:
    """Parse every specification, in order, into a list of commands."""
    commands = [parse_command(spec) for spec in specs]
    if not commands:
        raise ValueError("a job needs at least one command")
    return commands


def format_job(commands: Iterable[Command]) -> str:
    """Describe every command of a job, one block per command."""
    blocks = [
        f"Av:\t{command.program}\n"
        f"Arg:\t{command.arg}\n"
        f"Eof:\t{'(null)' if command.eof is None else command.eof}\n"
        f"Open_fd:\t{command.open_fd}\n"
        f"Append_fd:\t{command.append_fd}\n\n"
        for command in commands
    ]
    if not blocks:
        return ""
    return "CURRENT\n" + "".join(blocks)