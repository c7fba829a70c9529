"""Errors raised or returned while parsing crontab fields."""

from __future__ import annotations

from typing import Any, Optional, Sequence


class CronFieldError(ValueError):
    code = "cron_field_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidKind(CronFieldError):
    code = "invalid_kind"

    def __init__(self, kind: Any, valid: Sequence[str]):
        super().__init__(
            f"Invalid crontab field kind {kind!r}. Valid values are {', '.join(valid)}."
        )
        self.kind = kind
        self.valid = list(valid)


class EmptyClause(CronFieldError):
    code = "empty_clause"

    def __init__(self, message: str = "A crontab field value cannot be empty."):
        super().__init__(message)


class MalformedInteger(CronFieldError):
    code = "malformed_integer"

    def __init__(self, text: str, message: Optional[str] = None):
        super().__init__(message or f"'{text}' is not a valid integer.")
        self.text = text


class UnknownName(CronFieldError):
    code = "unknown_name"

    def __init__(self, name: str, candidates: Sequence[str]):
        super().__init__(
            f"'{name}' is not a known value name. "
            f"Use one of the following: {', '.join(candidates)}."
        )
        self.name = name
        self.candidates = list(candidates)


class OutOfRange(CronFieldError):
    code = "out_of_range"
    side = ""

    def __init__(self, value: int, bound: int, kind: Any, min_value: int, max_value: int):
        super().__init__(
            f"{value} is {self.side} than the {'minimum' if self.side == 'lower' else 'maximum'} "
            f"allowable value for the [{_kind_name(kind)}] field. "
            f"Value must be between {min_value} and {max_value} (all inclusive)."
        )
        self.value = value
        self.bound = bound
        self.kind = kind


class BelowMin(OutOfRange):
    code = "below_min"
    side = "lower"


class AboveMax(OutOfRange):
    code = "above_max"
    side = "higher"


class InvalidFieldExpression(CronFieldError):
    code = "invalid_field_expression"

    def __init__(self, kind: Any, raw: str, cause: CronFieldError):
        super().__init__(
            f"'{raw}' is not a valid [{_kind_name(kind)}] crontab field expression. {cause.message}"
        )
        self.kind = kind
        self.raw = raw
        self.cause = cause
        self.__cause__ = cause


def _kind_name(kind: Any) -> str:
    return getattr(kind, "label", None) or str(kind)
