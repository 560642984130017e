# repositories/run_length_codec.py
from typing import Iterable, List, Sequence

import numpy as np

from ..exceptions import InvalidRunsError
from ..models.run import Run


class RunLengthCodec:
    """
    Converts between a dense boolean row and its run list.

    • Dense rows are np.ndarray of dtype bool, True = white, False = black.
    • Run lists hold the black spans only, ordered, separated by >= 1 white px.
    """

    # ---------- public API ----------
    @staticmethod
    def expand(runs: Iterable[Run], width: int) -> np.ndarray:
        """
        Returns a (width,) bool row: all white, then every run painted black.
        Runs are trusted to be in bounds; see validate_runs.
        """
        row = np.ones(width, dtype=bool)
        for run in runs:
            row[run.start:run.end + 1] = False
        return row

    @staticmethod
    def collapse(row: Sequence[bool]) -> List[Run]:
        """
        Returns the canonical run list for a dense row.

        A run opens on each white→black edge and closes on the following
        black→white edge (or at width-1). Padding the row with white on both
        sides turns every edge into a non-zero step of np.diff.
        """
        black = ~np.asarray(row, dtype=bool)
        if black.size == 0:
            return []
        padded = np.concatenate(([0], black.astype(np.int8), [0]))
        edges = np.flatnonzero(np.diff(padded))
        starts, stops = edges[0::2], edges[1::2]
        return [Run(int(s), int(e) - 1) for s, e in zip(starts, stops)]

    @staticmethod
    def validate_runs(runs: Sequence[Run], width: int) -> None:
        prev_end = None
        for run in runs:
            if not 0 <= run.start <= run.end < width:
                raise InvalidRunsError(f"Run {run} out of bounds for width {width}")
            if prev_end is not None and run.start <= prev_end + 1:
                raise InvalidRunsError(
                    f"Run {run} overlaps or touches the previous run ending at {prev_end}"
                )
            prev_end = run.end
