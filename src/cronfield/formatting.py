"""Render a field back to crontab text, compacting consecutive runs into ranges."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Iterator, Protocol

from .descriptor import FieldDescriptor

if TYPE_CHECKING:
    from .field import CronField


class Writer(Protocol):
    def write(self, text: str) -> int: ...


def iter_runs(field: "CronField") -> Iterator[tuple[int, int]]:
    """Yield (first, last) for each maximal run of consecutive members."""
    value = field.first()
    while value is not None:
        first = last = value
        value = field.next(last + 1)
        while value is not None and value - last == 1:
            last = value
            value = field.next(last + 1)
        yield first, last


def format_value(descriptor: FieldDescriptor, value: int, use_names: bool = False) -> str:
    if use_names and descriptor.names:
        return descriptor.names[descriptor.value_to_index(value)]
    if 0 <= value < 100:
        # two characters at most for calendar-sized values
        return _SMALL_NUMBERS[value]
    return str(value)


def format_to(field: "CronField", writer: Writer, use_names: bool = False):
    descriptor = field.descriptor
    for count, (first, last) in enumerate(iter_runs(field)):
        if count == 0 and first == descriptor.min_value and last == descriptor.max_value:
            writer.write("*")
            return
        if count > 0:
            writer.write(",")
        writer.write(format_value(descriptor, first, use_names))
        if last != first:
            writer.write("-")
            writer.write(format_value(descriptor, last, use_names))


def format_field(field: "CronField", use_names: bool = False) -> str:
    buf = io.StringIO()
    format_to(field, buf, use_names)
    return buf.getvalue()


_SMALL_NUMBERS = tuple(str(n) for n in range(100))
