import numpy as np
import pytest

from rlebitmap.exceptions import InvalidRunsError
from rlebitmap.models.run import Run


def _row(bits):
    # "1" = white, "0" = black
    return np.array([c == "1" for c in bits], dtype=bool)


def test_collapse_empty_row(codec):
    assert codec.collapse(np.ones(0, dtype=bool)) == []


def test_collapse_all_black(codec):
    assert codec.collapse(_row("00000")) == [Run(0, 4)]


def test_collapse_all_white(codec):
    assert codec.collapse(_row("11111")) == []


@pytest.mark.parametrize("bits, runs", [
    ("1001", [Run(1, 2)]),
    ("0110", [Run(0, 0), Run(3, 3)]),
    ("0", [Run(0, 0)]),
    ("1", []),
    ("0101010", [Run(0, 0), Run(2, 2), Run(4, 4), Run(6, 6)]),
    ("1100011000", [Run(2, 4), Run(7, 9)]),
])
def test_collapse_known_rows(codec, bits, runs):
    assert codec.collapse(_row(bits)) == runs


def test_expand_paints_runs_black(codec):
    row = codec.expand([Run(1, 2), Run(5, 5)], 7)
    assert row.dtype == bool
    assert row.tolist() == [True, False, False, True, True, False, True]


def test_expand_no_runs_is_white(codec):
    assert codec.expand([], 4).tolist() == [True] * 4
    assert codec.expand([], 0).size == 0


def test_collapse_returns_plain_ints(codec):
    run = codec.collapse(_row("100"))[0]
    assert type(run.start) is int and type(run.end) is int


def test_lossless_and_idempotent(codec, random_grids):
    for grid in random_grids:
        for dense in grid.astype(bool):
            runs = codec.collapse(dense)
            expanded = codec.expand(runs, dense.size)
            assert np.array_equal(expanded, dense)
            assert codec.collapse(expanded) == runs


def test_gap_invariant_holds(codec, random_grids):
    for grid in random_grids:
        for dense in grid.astype(bool):
            runs = codec.collapse(dense)
            for prev, nxt in zip(runs, runs[1:]):
                assert nxt.start > prev.end + 1
            codec.validate_runs(runs, dense.size)


def test_collapse_accepts_python_lists(codec):
    assert codec.collapse([True, False, False]) == [Run(1, 2)]


@pytest.mark.parametrize("runs", [
    [Run(-1, 0)],
    [Run(2, 1)],
    [Run(0, 5)],
    [Run(0, 1), Run(2, 3)],   # touching
    [Run(0, 2), Run(1, 3)],   # overlapping
    [Run(3, 3), Run(0, 0)],   # out of order
])
def test_validate_runs_rejects(codec, runs):
    with pytest.raises(InvalidRunsError):
        codec.validate_runs(runs, 5)


def test_run_length_and_str():
    assert len(Run(2, 4)) == 3
    assert str(Run(0, 3)) == "(0,3)"
