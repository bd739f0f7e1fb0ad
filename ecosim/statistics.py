"""Per-tick population statistics and their export to CSV."""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class SimulationStats:
    """Entity counts recorded at one tick."""

    tick: int = 0
    plants: int = 0
    herbivores: int = 0
    predators: int = 0
    obstacles: int = 0


CSV_HEADER = ",".join(field.name for field in fields(SimulationStats))


class StatisticsCollector:
    """Accumulates one SimulationStats record per tick."""

    def __init__(self) -> None:
        self._records: list[SimulationStats] = []

    def add(self, stats: SimulationStats) -> None:
        """Append a record."""
        self._records.append(stats)

    @property
    def records(self) -> tuple[SimulationStats, ...]:
        """All records in the order they were added."""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def save_csv(self, filename: Union[str, Path]) -> None:
        """Write all records to a CSV file; raises OSError on failure."""
        lines = [CSV_HEADER]
        lines.extend(",".join(str(value) for value in astuple(row)) for row in self._records)
        with open(filename, "w", encoding="utf-8", newline="") as out:
            out.write("".join(f"{line}\n" for line in lines))