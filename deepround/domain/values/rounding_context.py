from dataclasses import dataclass


@dataclass(frozen=True)
class RoundingContext:
    """The (precision, percent) pair active while descending into a value."""

    precision: int
    percent: bool = False

    def __str__(self) -> str:
        suffix = ",percent" if self.percent else ""
        return f"{self.precision}{suffix}"
