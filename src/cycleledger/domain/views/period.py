"""Statement period value object."""

from dataclasses import dataclass
from datetime import date

from cycleledger.core.dates import month_key


@dataclass(frozen=True)
class Period:
    """
    Contiguous statement window ``[start, end]`` (both inclusive).

    Periods are derived from a closing day and never persisted.
    """

    start: date
    end: date

    @property
    def key(self) -> str:
        """``YYYY-MM`` of the month the period closes in."""
        return month_key(self.end)

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"
