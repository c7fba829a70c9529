"""Nearest-member lookup over a field's bits, forwards or backwards."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .field import CronField


class NearestValueIterator:
    def __init__(self, field: "CronField", forward: bool = True):
        self.field = field
        self.forward = forward

    @property
    def lower_bound(self) -> Optional[int]:
        """Tracked bound the scan starts from: first member forwards, last backwards."""
        return self.field.first() if self.forward else self.field.last()

    @property
    def upper_bound(self) -> Optional[int]:
        return self.field.last() if self.forward else self.field.first()

    def beyond_lower_bound(self, start: int, bound: int) -> bool:
        return start < bound if self.forward else start > bound

    def next(self, start: int) -> Optional[int]:
        """Return the nearest member at or past start in this direction, or None."""
        lower, upper = self.lower_bound, self.upper_bound
        if lower is None or upper is None:
            return None

        if self.beyond_lower_bound(start, lower):
            return lower

        descriptor = self.field.descriptor
        first_index = descriptor.value_to_index(start)
        last_index = descriptor.value_to_index(upper)
        step = 1 if self.forward else -1

        for index in range(first_index, last_index + step, step):
            if self.field.has_index(index):
                return descriptor.index_to_value(index)
        return None
