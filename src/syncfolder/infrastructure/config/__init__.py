"""Configuration helpers."""

from .settings_utils import (
    coerce_int,
    env_bool,
    env_str,
    parse_bool,
)

__all__ = [
    "coerce_int",
    "env_bool",
    "env_str",
    "parse_bool",
]
