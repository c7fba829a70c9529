"""Crontab field value set: parse, accumulate, query and format."""

from __future__ import annotations

import logging
import sys
from typing import Iterator, Optional

from .descriptor import FieldDescriptor, FieldKind, KindLike, descriptor_for
from .errors import AboveMax, BelowMin, InvalidFieldExpression
from .formatting import Writer, format_field, format_to
from .iterator import NearestValueIterator
from .parser import parse_expression
from .types import NIL, Result

logger = logging.getLogger(__name__)

# Low-bound sentinel while nothing is set; any real value compares below it.
_UNSET_LOW = sys.maxsize


class CronField:
    """Set of values selected by one crontab field expression.

    Members live in an integer bitmask where bit ``i`` stands for
    ``descriptor.min_value + i``. ``_min_value_set`` / ``_max_value_set``
    are safe bounds on the members that let ``next``/``prev`` skip the scan.
    The set only grows, and only while an expression is being parsed.
    """

    __slots__ = ("descriptor", "_bits", "_min_value_set", "_max_value_set")

    def __init__(self, descriptor: FieldDescriptor):
        self.descriptor = descriptor
        self._bits = 0
        self._min_value_set = _UNSET_LOW
        self._max_value_set = NIL

    # -- parsing ---------------------------------------------------------

    @classmethod
    def parse(cls, kind: KindLike, expression: str) -> "CronField":
        """Parse an expression for the given kind, raising InvalidFieldExpression."""
        return parse(descriptor_for(kind), expression).unwrap()

    @classmethod
    def try_parse(cls, kind: KindLike, expression: str) -> Optional["CronField"]:
        result = parse(descriptor_for(kind), expression)
        return result.value if result.success else None

    def accumulate(self, start: int, end: int, interval: int) -> Result["CronField"]:
        """Add start..end stepped by interval to the set.

        start == end == NIL selects the whole domain. On failure nothing
        is changed and the returned result carries BelowMin or AboveMax.
        """
        min_value = self.descriptor.min_value
        max_value = self.descriptor.max_value

        if start == end:
            if start < 0:
                if interval <= 1:
                    self._bits = (1 << self.descriptor.value_count) - 1
                    self._min_value_set = min_value
                    self._max_value_set = max_value
                    return Result.ok(self)
                start, end = min_value, max_value
            elif start < min_value:
                return Result.fail(self._below_min(start))
            elif start > max_value:
                return Result.fail(self._above_max(start))
        else:
            if start > end:
                start, end = end, start

            if start < 0:
                start = min_value
            elif start < min_value:
                return Result.fail(self._below_min(start))

            if end < 0:
                end = max_value
            elif end > max_value:
                return Result.fail(self._above_max(end))

        interval = max(interval, 1)

        first_index = start - min_value
        last_index = end - min_value
        for index in range(first_index, last_index + 1, interval):
            self._bits |= 1 << index

        # the stride may stop short of end
        last_touched = start + ((end - start) // interval) * interval

        if self._min_value_set > start:
            self._min_value_set = start
        if self._max_value_set < last_touched:
            self._max_value_set = last_touched

        return Result.ok(self)

    def _below_min(self, value: int) -> BelowMin:
        d = self.descriptor
        return BelowMin(value, d.min_value, d.kind, d.min_value, d.max_value)

    def _above_max(self, value: int) -> AboveMax:
        d = self.descriptor
        return AboveMax(value, d.max_value, d.kind, d.min_value, d.max_value)

    # -- queries -----------------------------------------------------------

    @property
    def kind(self) -> FieldKind:
        return self.descriptor.kind

    def first(self) -> Optional[int]:
        return self._min_value_set if self._min_value_set != _UNSET_LOW else None

    def last(self) -> Optional[int]:
        return self._max_value_set if self._max_value_set != NIL else None

    def has_index(self, index: int) -> bool:
        return index >= 0 and bool((self._bits >> index) & 1)

    def contains(self, value: int) -> bool:
        if not self.descriptor.in_domain(value):
            return False
        return self.has_index(self.descriptor.value_to_index(value))

    def next(self, start: int) -> Optional[int]:
        """Smallest member >= start, or None."""
        return NearestValueIterator(self, forward=True).next(start)

    def prev(self, start: int) -> Optional[int]:
        """Largest member <= start, or None."""
        return NearestValueIterator(self, forward=False).next(start)

    def values(self) -> Iterator[int]:
        value = self.next(self.descriptor.min_value)
        while value is not None:
            yield value
            value = self.next(value + 1)

    def is_empty(self) -> bool:
        return self._bits == 0

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def __iter__(self) -> Iterator[int]:
        return self.values()

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CronField):
            return NotImplemented
        return self.descriptor.kind == other.descriptor.kind and self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    # -- formatting --------------------------------------------------------

    def format(self, use_names: bool = False) -> str:
        return format_field(self, use_names)

    def format_to(self, writer: Writer, use_names: bool = False):
        format_to(self, writer, use_names)

    def to_string(self, fmt: Optional[str] = None) -> str:
        """Format with "G" (numbers, the default) or "N" (names where known)."""
        if fmt is None or fmt == "G":
            return self.format(use_names=False)
        if fmt == "N":
            return self.format(use_names=True)
        raise ValueError(f"Unknown crontab field format: {fmt!r}")

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"CronField({self.kind.label}, {self.format()!r})"


def parse(descriptor: FieldDescriptor, expression: str) -> Result[CronField]:
    """Parse expression into a new field; failures come back wrapped in
    InvalidFieldExpression rather than being raised."""
    field = CronField(descriptor)
    result = parse_expression(descriptor, expression or "", field.accumulate)
    if not result.success:
        error = InvalidFieldExpression(descriptor.kind, expression, result.error)
        logger.debug(
            "Rejected %s field expression %r: %s", descriptor.kind.label, expression, result.error
        )
        return Result.fail(error)
    return Result.ok(field)


def seconds(expression: str) -> CronField:
    return CronField.parse(FieldKind.SECOND, expression)


def minutes(expression: str) -> CronField:
    return CronField.parse(FieldKind.MINUTE, expression)


def hours(expression: str) -> CronField:
    return CronField.parse(FieldKind.HOUR, expression)


def days(expression: str) -> CronField:
    return CronField.parse(FieldKind.DAY, expression)


def months(expression: str) -> CronField:
    return CronField.parse(FieldKind.MONTH, expression)


def days_of_week(expression: str) -> CronField:
    return CronField.parse(FieldKind.DAY_OF_WEEK, expression)
