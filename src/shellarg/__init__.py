"""shellarg - short-flag options and trailing parameters from an argument vector."""

from shellarg.application import CommandLineArguments
from shellarg.application.parsers import ArgumentSchema, ArgvParser, ParsedArguments
from shellarg.domain.exceptions import (
    ArgumentError,
    ArgumentLookupError,
    InsufficientParametersError,
    InvalidArgumentError,
    InvalidSwitchError,
    MissingOptionValueError,
    ParseError,
    ParserStateError,
    SchemaError,
    UnknownOptionError,
    UnknownParameterError,
)
from shellarg.domain.types import OptionKind, OptionValue

__all__ = [
    "CommandLineArguments",
    "ArgumentSchema",
    "ArgvParser",
    "ParsedArguments",
    "OptionKind",
    "OptionValue",
    "ArgumentError",
    "ArgumentLookupError",
    "InsufficientParametersError",
    "InvalidArgumentError",
    "InvalidSwitchError",
    "MissingOptionValueError",
    "ParseError",
    "ParserStateError",
    "SchemaError",
    "UnknownOptionError",
    "UnknownParameterError",
]
