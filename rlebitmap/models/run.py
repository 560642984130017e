from dataclasses import dataclass


@dataclass(frozen=True)
class Run:
    """
    One maximal span of black pixels in a row, closed interval [start, end].
    """
    start: int  # first black column
    end: int    # last black column (inclusive)

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __str__(self) -> str:
        return f"({self.start},{self.end})"
