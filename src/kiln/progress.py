"""Progress reporting for the rendering walk."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TaskID, TextColumn

__all__ = ["NullProgress", "ProgressReporter", "SpinnerProgress"]


@runtime_checkable
class ProgressReporter(Protocol):
    """Receives advisory updates while files are processed."""

    def set_message(self, text: str) -> None:
        ...

    def finish_and_clear(self) -> None:
        ...


class NullProgress:
    """Reporter that discards every update."""

    def set_message(self, text: str) -> None:
        return None

    def finish_and_clear(self) -> None:
        return None


class SpinnerProgress:
    """Transient spinner showing the file currently being rendered.

    The spinner starts on the first message. Use it as a context manager so
    the live display is stopped even when the walk fails.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console or Console(stderr=True),
            transient=True,
        )
        self._task: Optional[TaskID] = None

    def set_message(self, text: str) -> None:
        if self._task is None:
            self._progress.start()
            self._task = self._progress.add_task(escape(text), total=None)
            return
        self._progress.update(self._task, description=escape(text))

    def finish_and_clear(self) -> None:
        if self._task is None:
            return
        self._progress.remove_task(self._task)
        self._progress.stop()
        self._task = None

    def __enter__(self) -> "SpinnerProgress":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.finish_and_clear()
