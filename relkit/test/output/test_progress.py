from __future__ import annotations

import io

from rich.console import Console

from relkit.output.progress import MockProgress, ProgressEvent, RichProgress


def test_mock_progress_records_events() -> None:
    progress = MockProgress()
    progress.start("Start to release")
    progress.info("Publishing ....")
    progress.fail("push rejected")
    progress.stop()

    assert progress.events[0] == ProgressEvent("start", "Start to release")
    assert progress.texts("info") == ["Publishing ...."]
    assert progress.texts("fail") == ["push rejected"]
    assert progress.events[-1].kind == "stop"


def test_rich_progress_persists_status_lines() -> None:
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, width=80)
    progress = RichProgress(console)

    progress.start('Start to release "widget 1.5.0"')
    progress.info("Create a release commit ...")
    progress.succeed("Released to GitHub successfully")
    progress.fail("[boom]")
    progress.stop()

    out = buffer.getvalue()
    assert "Create a release commit ..." in out
    assert "Released to GitHub successfully" in out
    assert "[boom]" in out
