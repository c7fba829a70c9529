"""Crontab field grammar: *, N, N-M, name prefixes, /step and comma lists.

    expr   := clause (',' clause)*
    clause := base ('/' interval)?
    base   := '*' | value | value '-' value
    value  := digits | name-prefix

Every resolved clause is handed to an accumulator callback as
(start, end, interval). The parse stops at the first failed clause.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from .descriptor import FieldDescriptor
from .errors import CronFieldError, EmptyClause, MalformedInteger, UnknownName
from .types import NIL, Result

Accumulator = Callable[[int, int, int], Result]

WILDCARD = "*"

_DIGITS = re.compile(r"[0-9]+")
_INTERVAL = re.compile(r"[+-]?[0-9]+")


def parse_expression(descriptor: FieldDescriptor, text: str, accumulate: Accumulator) -> Result:
    if not text:
        return Result.ok()

    for clause in text.split(","):
        result = parse_clause(descriptor, clause, accumulate)
        if not result.success:
            return result
    return Result.ok()


def parse_clause(descriptor: FieldDescriptor, clause: str, accumulate: Accumulator) -> Result:
    try:
        start, end, interval = resolve_clause(descriptor, clause)
    except CronFieldError as exc:
        return Result.fail(exc)
    return accumulate(start, end, interval)


def resolve_clause(descriptor: FieldDescriptor, clause: str) -> tuple[int, int, int]:
    """Turn one clause into the (start, end, interval) triple to accumulate."""
    clause = clause.strip()
    if not clause:
        raise EmptyClause()

    base, slash, step = clause.partition("/")
    base = base.strip()
    every = parse_interval(step) if slash else None

    if base == WILDCARD:
        return NIL, NIL, every or 1

    first, dash, last = base.partition("-")
    if dash:
        return resolve_value(descriptor, first), resolve_value(descriptor, last), every or 1

    value = resolve_value(descriptor, base)
    if every is not None:
        return value, descriptor.max_value, every
    return value, value, 1


def parse_interval(text: str) -> int:
    text = text.strip()
    if not _INTERVAL.fullmatch(text):
        raise MalformedInteger(text, f"'{text}' is not a valid step interval.")
    return int(text)


def resolve_value(descriptor: FieldDescriptor, text: str) -> int:
    """Resolve a number or a name prefix to a field value (not range-checked)."""
    text = text.strip()
    if not text:
        raise EmptyClause()

    if text[0].isdigit():
        if not _DIGITS.fullmatch(text):
            raise MalformedInteger(text)
        return int(text)

    if not descriptor.names:
        raise MalformedInteger(
            text,
            f"'{text}' is not a valid [{descriptor.kind.label}] crontab field value. "
            f"It must be a numeric value between {descriptor.min_value} and "
            f"{descriptor.max_value} (all inclusive).",
        )

    value: Optional[int] = descriptor.lookup_name(text)
    if value is None:
        raise UnknownName(text, descriptor.names)
    return value
