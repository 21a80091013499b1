"""Running a job: each command's output feeds the next one's input."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Mapping, Optional, Sequence

from pipechain.command import Command, format_job, parse_job


def _executable(program: str) -> str:
    # The program is run by path, never looked up on PATH.
    if os.sep in program or (os.altsep and os.altsep in program):
        return program
    return os.path.join(os.curdir, program)


def _spawn(
    command: Command,
    stdin: Optional[int],
    stdout: Optional[int],
    env: Optional[Mapping[str, str]],
) -> Optional[subprocess.Popen]:
    try:
        return subprocess.Popen(
            [command.program, command.arg],
            executable=_executable(command.program),
            stdin=stdin,
            stdout=stdout,
            env=None if env is None else dict(env),
        )
    except OSError as error:
        print(f"execve: {error.strerror or error}", file=sys.stderr)
        return None


def run_command(
    command: Command,
    stdin: Optional[int] = None,
    stdout: Optional[int] = None,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run one command with the given descriptors and wait for it.

    Returns its exit status; a program that cannot be started gives 1.
    """
    process = _spawn(command, stdin, stdout, env)
    if process is None:
        return 1
    return process.wait()


def run_pipeline(
    commands: Sequence[Command], env: Optional[Mapping[str, str]] = None
) -> list[int]:
    """Run the commands connected by pipes; the last writes to standard output.

    Returns the exit status of every command, in order.
    """
    processes: list[Optional[subprocess.Popen]] = []
    input_fd: Optional[int] = None
    for position, command in enumerate(commands):
        last = position == len(commands) - 1
        read_end = write_end = None
        if not last:
            read_end, write_end = os.pipe()
        try:
            processes.append(_spawn(command, input_fd, write_end, env))
        finally:
            if write_end is not None:
                os.close(write_end)
            if input_fd is not None:
                os.close(input_fd)
        input_fd = read_end
    return [1 if process is None else process.wait() for process in processes]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command specifications, describe them and run the job."""
    specs = sys.argv[1:] if argv is None else list(argv)
    try:
        commands = parse_job(specs)
    except ValueError as error:
        print(f"pipechain: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(format_job(commands))
    sys.stdout.flush()
    run_pipeline(commands, env=os.environ)
    return 0


if __name__ == "__main__":
    sys.exit(main())