"""Field kinds and their value domains."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from .errors import InvalidKind


class FieldKind(IntEnum):
    SECOND = 0
    MINUTE = 1
    HOUR = 2
    DAY = 3
    MONTH = 4
    DAY_OF_WEEK = 5

    @property
    def label(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass(frozen=True)
class FieldDescriptor:
    kind: FieldKind
    min_value: int
    max_value: int
    names: Optional[tuple[str, ...]] = None

    def __post_init__(self):
        if self.min_value < 0 or self.max_value < self.min_value:
            raise ValueError(f"Invalid domain {self.min_value}..{self.max_value} for {self.kind.label}")
        if self.names is not None and len(self.names) != self.value_count:
            raise ValueError(
                f"{self.kind.label} names must cover {self.value_count} values, got {len(self.names)}"
            )

    @property
    def value_count(self) -> int:
        return self.max_value - self.min_value + 1

    def in_domain(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def value_to_index(self, value: int) -> int:
        return value - self.min_value

    def index_to_value(self, index: int) -> int:
        return index + self.min_value

    def lookup_name(self, prefix: str) -> Optional[int]:
        """Return the value whose name starts with prefix (case-insensitive), or None.

        Names are tried in domain order, so the first match wins.
        """
        if not self.names or not prefix:
            return None
        needle = prefix.casefold()
        for index, name in enumerate(self.names):
            if name.casefold().startswith(needle):
                return self.index_to_value(index)
        return None

    def name_of(self, value: int) -> Optional[str]:
        if not self.names:
            return None
        return self.names[self.value_to_index(value)]


SECOND = FieldDescriptor(FieldKind.SECOND, 0, 59)
MINUTE = FieldDescriptor(FieldKind.MINUTE, 0, 59)
HOUR = FieldDescriptor(FieldKind.HOUR, 0, 23)
DAY = FieldDescriptor(FieldKind.DAY, 1, 31)
MONTH = FieldDescriptor(
    FieldKind.MONTH,
    1,
    12,
    (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
)
DAY_OF_WEEK = FieldDescriptor(
    FieldKind.DAY_OF_WEEK,
    0,
    6,
    ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
)

DESCRIPTORS: tuple[FieldDescriptor, ...] = (SECOND, MINUTE, HOUR, DAY, MONTH, DAY_OF_WEEK)

KindLike = Union[FieldKind, int, str]


def descriptor_for(kind: KindLike) -> FieldDescriptor:
    """Look up the descriptor for a kind given as enum member, ordinal or name."""
    if isinstance(kind, str):
        key = kind.strip().replace("_", "").replace("-", "").lower()
        for member in FieldKind:
            if member.label.lower() == key:
                return DESCRIPTORS[member]
        raise InvalidKind(kind, [k.label for k in FieldKind])

    # bool is an int subclass but never a valid kind
    if isinstance(kind, int) and not isinstance(kind, bool) and 0 <= kind < len(DESCRIPTORS):
        return DESCRIPTORS[kind]

    raise InvalidKind(kind, [k.label for k in FieldKind])
