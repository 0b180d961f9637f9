"""Record and partition definitions."""

from leapquiz.schema.base import (
    FRONT_BACK_DIVIDER,
    SUB_SENSE_MARKERS,
    Direction,
    WordRecord,
)
from leapquiz.schema.partitions import PARTITIONS, PartitionDefinition

__all__ = [
    "FRONT_BACK_DIVIDER",
    "SUB_SENSE_MARKERS",
    "Direction",
    "WordRecord",
    "PARTITIONS",
    "PartitionDefinition",
]
