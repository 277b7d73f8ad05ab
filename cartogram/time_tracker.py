"""Wall-clock timing of named tasks."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from typing import TextIO

_NS_PER_MS = 1_000_000


class TimeTracker:
    """Accumulates the time spent in named tasks, in whole milliseconds.

    The clock is a callable returning nanoseconds from a monotonic source.
    """

    def __init__(
        self, name: str = "", clock: Callable[[], int] = time.monotonic_ns
    ) -> None:
        self.name = name
        self._clock = clock
        self._start_times: dict[str, int] = {}
        self._durations: dict[str, int] = {}

    def start(self, task_name: str) -> None:
        """Start (or restart) timing task_name."""
        self._start_times[task_name] = self._clock()

    def stop(self, task_name: str) -> None:
        """Stop timing task_name and add the elapsed time to its total."""
        now = self._clock()
        try:
            started = self._start_times.pop(task_name)
        except KeyError:
            raise KeyError(f"task {task_name!r} was not started") from None
        elapsed_ms = (now - started) // _NS_PER_MS
        self._durations[task_name] = self._durations.get(task_name, 0) + elapsed_ms

    def swap(self, t1: str, t2: str) -> None:
        """Stop t1 and start t2."""
        self.stop(t1)
        self.start(t2)

    def duration(self, task_name: str) -> int:
        """Total milliseconds recorded for task_name."""
        try:
            return self._durations[task_name]
        except KeyError:
            raise KeyError(f"no duration recorded for {task_name!r}") from None

    @property
    def durations(self) -> dict[str, int]:
        """A copy of all recorded totals, in milliseconds."""
        return dict(self._durations)

    def summary_report(self) -> str:
        """A report of all tasks, longest first."""
        ordered = sorted(
            sorted(self._durations.items()), key=lambda item: item[1], reverse=True
        )
        lines = ["", "********** Time Report **********", f"({self.name})", ""]
        lines.extend(f"{task}: {ms} ms" for task, ms in ordered)
        lines.append("*********************************")
        return "\n".join(lines) + "\n"

    def print_summary_report(self, file: TextIO | None = None) -> None:
        """Write the summary report to file, standard error by default."""
        stream = sys.stderr if file is None else file
        stream.write(self.summary_report())