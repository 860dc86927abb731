from __future__ import annotations

import io

from rich.console import Console

from kiln.progress import NullProgress, ProgressReporter, SpinnerProgress


def test_reporters_satisfy_protocol():
    assert isinstance(NullProgress(), ProgressReporter)
    assert isinstance(SpinnerProgress(Console(file=io.StringIO())), ProgressReporter)


def test_spinner_lifecycle():
    console = Console(file=io.StringIO(), force_terminal=False)
    with SpinnerProgress(console) as progress:
        progress.set_message("/tmp/[bold]odd[/bold].txt")
        progress.set_message("/tmp/second.txt")
        progress.finish_and_clear()
        progress.finish_and_clear()


def test_spinner_without_messages_finishes_quietly():
    SpinnerProgress(Console(file=io.StringIO())).finish_and_clear()
