"""Here-document capture and replay, and opening redirection files."""

from __future__ import annotations

import os
import sys
from typing import Iterable, Optional, TextIO

from pipechain.lines import LineReader

HEREDOC_PATH = "tmp_heredoc"
PROMPT = "> "


def collect_heredoc(
    delimiter: str,
    source: Optional[Iterable[str]] = None,
    prompt: Optional[TextIO] = None,
    path: str = HEREDOC_PATH,
) -> str:
    """Copy lines from ``source`` into ``path`` until the delimiter line.

    The delimiter line is exactly ``delimiter`` followed by a newline and is
    not written. A prompt is shown before each line is read. ``source``
    defaults to standard input and ``prompt`` to standard output. Returns
    the path written.
    """
    lines = LineReader(0) if source is None else source
    out = sys.stdout if prompt is None else prompt
    terminator = delimiter + "\n"
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
        out.write(PROMPT)
        out.flush()
        for line in lines:
            if line == terminator:
                break
            handle.write(line)
            out.write(PROMPT)
            out.flush()
    return path


def replay_heredoc(output_fd: int, path: str = HEREDOC_PATH) -> int:
    """Write the saved here-document to ``output_fd`` and delete it.

    Returns the number of bytes written; a missing file writes nothing.
    """
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError:
        return 0
    written = 0
    while written < len(data):
        written += os.write(output_fd, data[written:])
    os.unlink(path)
    return written


def open_file(path: str) -> int:
    """Open ``path`` for reading and writing, creating it if needed."""
    return os.open(path, os.O_RDWR | os.O_CREAT, 0o666)


def open_append(path: str) -> int:
    """Open ``path`` for reading and appending, creating it if needed."""
    return os.open(path, os.O_RDWR | os.O_CREAT | os.O_APPEND, 0o666)