"""Progress reporting while insets are being integrated."""

from __future__ import annotations

import math
import sys
import time
from typing import TextIO

MAX_PERMITTED_AREA_ERROR = 0.01

_BAR_WIDTH = 75
_FILL = "■"
_REMAINDER = "-"
_BOLD = "\033[1m"
_RESET = "\033[0m"


def _log5(value: float) -> float:
    if value > 0:
        return math.log(value) / math.log(5)
    if value == 0:
        return -math.inf
    return math.nan


class ProgressTracker:
    """Estimates overall progress from the area errors of finished integrations.

    Progress is a fraction between 0 and 1. Every update writes a line with
    the value and a progress bar to the stream, standard error by default.
    """

    def __init__(
        self,
        total_geo_divs: float,
        stream: TextIO | None = None,
        max_permitted_area_error: float = MAX_PERMITTED_AREA_ERROR,
    ) -> None:
        self.total_geo_divs = float(total_geo_divs)
        self.max_permitted_area_error = max_permitted_area_error
        self._stream = stream
        self._progress = 0.0
        self._max_progress = 0.0
        self._started = time.monotonic()
        self._render_bar(0.0)

    @property
    def stream(self) -> TextIO:
        return sys.stderr if self._stream is None else self._stream

    @property
    def progress(self) -> float:
        """Progress accounted for by insets that have finished integrating."""
        return self._progress

    @property
    def max_progress(self) -> float:
        """Highest progress reported within the current inset."""
        return self._max_progress

    def print_progress_mid_integration(
        self,
        max_area_error: float,
        n_geo_divs_in_inset: int,
        n_finished_integrations: int,
    ) -> float:
        """Report progress after one integration of an inset and return it.

        The maximum area error is assumed to drop to a fifth with every
        integration; the estimate never falls and stays below 100%.
        """
        ratio = max_area_error / self.max_permitted_area_error
        n_predicted = max(_log5(ratio), 1.0)
        inset_max_frac = n_geo_divs_in_inset / self.total_geo_divs
        progress = self._progress + inset_max_frac / n_predicted

        dynamic_increment = (1.0 - self._max_progress) * 0.1

        progress = min(progress, 0.75)
        if n_finished_integrations < 4:
            progress = min(progress, self._max_progress)
        progress = max(progress, self._max_progress + dynamic_increment)

        self._max_progress = progress
        self._report(progress)
        return progress

    def update_and_print_progress_end_integration(
        self, n_geo_divs_in_inset: int
    ) -> float:
        """Account for a finished inset, report the progress and return it."""
        self._max_progress = 0.0
        self._progress += n_geo_divs_in_inset / self.total_geo_divs
        self._report(self._progress)
        return self._progress

    def _report(self, progress: float) -> None:
        self.stream.write(f"Progress: {progress:g}\n")
        self._render_bar(progress)
        self.stream.write("\n")

    def _render_bar(self, progress: float) -> None:
        percent = max(0, min(100, int(round(progress * 100))))
        filled = _BAR_WIDTH * percent // 100
        bar = _FILL * filled + _REMAINDER * (_BAR_WIDTH - filled)
        elapsed = int(time.monotonic() - self._started)
        minutes, seconds = divmod(elapsed, 60)
        self.stream.write(
            f"{_BOLD}[{bar}] {percent}% [{minutes:02d}m:{seconds:02d}s]{_RESET}\n"
        )