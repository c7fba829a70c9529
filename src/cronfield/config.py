"""Environment-driven defaults for parsing and formatting fields."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .descriptor import KindLike, descriptor_for
from .field import CronField, parse

logger = logging.getLogger(__name__)

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass
class FieldConfig:
    format_names: bool = False
    # Fall back to an empty field instead of raising on bad expressions
    tolerant: bool = False

    @classmethod
    def from_env(cls) -> "FieldConfig":
        return cls(
            format_names=_env_flag("CRONFIELD_FORMAT_NAMES"),
            tolerant=_env_flag("CRONFIELD_TOLERANT"),
        )


def parse_with_config(kind: KindLike, expression: str, config: Optional[FieldConfig] = None) -> CronField:
    config = config or FieldConfig.from_env()
    descriptor = descriptor_for(kind)
    result = parse(descriptor, expression)
    if result.success:
        return result.value
    if not config.tolerant:
        raise result.error
    logger.warning("Using empty %s field in place of %r: %s", descriptor.kind.label, expression, result.error.cause)
    return CronField(descriptor)


def format_with_config(field: CronField, config: Optional[FieldConfig] = None) -> str:
    config = config or FieldConfig.from_env()
    return field.format(use_names=config.format_names)
