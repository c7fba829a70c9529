"""cronfield - crontab field parsing, nearest-value lookup and formatting."""

from cronfield.config import FieldConfig, format_with_config, parse_with_config
from cronfield.descriptor import DESCRIPTORS, FieldDescriptor, FieldKind, descriptor_for
from cronfield.errors import (
    AboveMax,
    BelowMin,
    CronFieldError,
    EmptyClause,
    InvalidFieldExpression,
    InvalidKind,
    MalformedInteger,
    OutOfRange,
    UnknownName,
)
from cronfield.field import CronField, days, days_of_week, hours, minutes, months, parse, seconds
from cronfield.formatting import format_field
from cronfield.iterator import NearestValueIterator
from cronfield.types import NIL, Result

__version__ = "0.1.0"
__all__ = [
    "AboveMax",
    "BelowMin",
    "CronField",
    "CronFieldError",
    "DESCRIPTORS",
    "EmptyClause",
    "FieldConfig",
    "FieldDescriptor",
    "FieldKind",
    "InvalidFieldExpression",
    "InvalidKind",
    "MalformedInteger",
    "NIL",
    "NearestValueIterator",
    "OutOfRange",
    "Result",
    "UnknownName",
    "days",
    "days_of_week",
    "descriptor_for",
    "format_field",
    "format_with_config",
    "hours",
    "minutes",
    "months",
    "parse",
    "parse_with_config",
    "seconds",
]
