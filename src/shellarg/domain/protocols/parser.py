"""Argument parser protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from shellarg.application.parsers.result import ParsedArguments
    from shellarg.application.parsers.schema import ArgumentSchema

__all__ = ["ArgumentParser"]


class ArgumentParser(Protocol):
    """Protocol for argument parsers.

    This protocol defines the interface for turning a raw argument vector
    into parsed arguments according to a schema.
    """

    def parse(
        self,
        schema: ArgumentSchema,
        raw_args: Sequence[str],
    ) -> ParsedArguments:
        """Parse a raw argument vector.

        Args:
            schema: Declared parameters and options
            raw_args: Full argument vector, program name at index 0

        Returns:
            Parsed parameter and option values

        Raises:
            ParseError: If the vector does not match the schema
        """
        ...
