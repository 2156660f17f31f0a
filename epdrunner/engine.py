"""
Engine process management.
"""

import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator

from epdrunner.constants import ENGINE_EXIT_TIMEOUT
from epdrunner.driver import UciSession
from epdrunner.epd import EpdPosition
from epdrunner.errors import EngineProtocolError


@contextmanager
def open_engine(command: str | Path | list[str], debug: bool = False,
                on_line: Callable[[EpdPosition, str], None] | None = None) -> Iterator[UciSession]:
    """
    Start a UCI engine and yield a session on its stdin/stdout.

    command can be:
    - str/Path: path to a native executable
    - list: a full argv, e.g. ["java", "-jar", "path/to/engine.jar"]

    The engine's stderr is inherited so its own diagnostics reach the
    terminal. On exit the streams are closed and the process is reaped,
    terminating it if it has not exited by itself.
    """
    args = command if isinstance(command, list) else [str(command)]
    try:
        process = subprocess.Popen(
            args,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            text=True,
            bufsize=1,
        )
    except OSError as e:
        raise EngineProtocolError(f"Failed to start engine {args[0]}: {e}") from e

    try:
        with UciSession(process.stdout, process.stdin, debug=debug, on_line=on_line) as session:
            yield session
    finally:
        try:
            process.wait(timeout=ENGINE_EXIT_TIMEOUT)
        except subprocess.TimeoutExpired:
            process.terminate()
            process.wait()
