"""Fixed catalog of named id ranges ("parts") used for quick filtering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class PartitionDefinition:
    """Inclusive id range. ``end`` of None means up to the store's max id."""
    key: str
    start: int
    end: Optional[int]
    label: str

    @property
    def open_ended(self) -> bool:
        return self.end is None


PARTITIONS: Dict[str, PartitionDefinition] = {
    "part1": PartitionDefinition("part1", 1, 400, "Part 1"),
    "part2": PartitionDefinition("part2", 401, 1000, "Part 2"),
    "part3": PartitionDefinition("part3", 1001, 1400, "Part 3"),
    "part4": PartitionDefinition("part4", 1401, None, "Part 4"),
}


__all__ = [
    "PartitionDefinition",
    "PARTITIONS",
]
