"""Argument parsing package for process argument vectors."""

from shellarg.application.parsers.argv import ArgvParser
from shellarg.application.parsers.result import ParsedArguments
from shellarg.application.parsers.schema import ArgumentSchema

__all__ = [
    "ArgvParser",
    "ArgumentSchema",
    "ParsedArguments",
]
