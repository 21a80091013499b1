"""Run programs chained by pipes, with heredoc, line-reading, text and buffer helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "numbers",
    "memory",
    "strings",
    "linked",
    "output",
    "lines",
    "command",
    "heredoc",
    "pipeline",
]