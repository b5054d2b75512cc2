"""Shared domain types."""

from shellarg.domain.types.options import OptionKind, OptionValue

__all__ = [
    "OptionKind",
    "OptionValue",
]
