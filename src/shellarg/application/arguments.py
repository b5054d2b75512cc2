"""Command line argument set: declare, parse once, then look up values.

This is the single object most programs use. It owns an ArgumentSchema,
hands it to an ArgumentParser on parse() and answers lookups from the
resulting ParsedArguments.

Example:
    # create command line arguments for a "copy" command
    args = CommandLineArguments()
    args.add_parameters(["source", "destination"])
    args.add_options({
        "r": OptionKind.SWITCH,  # recursively copy
        "z": OptionKind.INPUT,   # zip the files to a location
    })
    args.parse()

    # copy.py ./my-files/important.txt ./backups
    # copy.py -r ./my-files ./backups
    # copy.py -r -z myzip.zip ./my-files ./backups
"""

from __future__ import annotations

import sys
from typing import Iterable, Mapping, Optional, Sequence

from shellarg.application.parsers import ArgumentSchema, ArgvParser, ParsedArguments
from shellarg.domain.exceptions import (
    ParserStateError,
    UnknownOptionError,
    UnknownParameterError,
)
from shellarg.domain.protocols import ArgumentParser
from shellarg.domain.types import OptionKind, OptionValue
from shellarg.logger import get_logger

logger = get_logger(__name__)


class CommandLineArguments:
    """Declared parameters and options plus the values parsed for them."""

    def __init__(
        self,
        schema: Optional[ArgumentSchema] = None,
        parser: Optional[ArgumentParser] = None,
    ) -> None:
        self.schema = schema or ArgumentSchema()
        self.parser = parser or ArgvParser()
        self._parsed: Optional[ParsedArguments] = None

    @property
    def parsed(self) -> Optional[ParsedArguments]:
        return self._parsed

    def add_parameter(self, name: str) -> None:
        self.schema.add_parameter(name)

    def add_parameters(self, names: Iterable[str]) -> None:
        self.schema.add_parameters(names)

    def add_option(self, flag: str, kind: OptionKind | str) -> None:
        self.schema.add_option(flag, kind)

    def add_options(self, options: Mapping[str, OptionKind | str]) -> None:
        self.schema.add_options(options)

    def parse(self, argv: Optional[Sequence[str]] = None) -> ParsedArguments:
        """
        Parse the argument vector once and freeze the schema.

        Args:
            argv: Full argument vector with the program name first; defaults to sys.argv

        Returns:
            The parsed arguments

        Raises:
            ParserStateError: If the arguments were already parsed
            ParseError: If the vector does not match the schema
        """
        if self._parsed is not None:
            raise ParserStateError("The arguments were already parsed.")

        if argv is None:
            argv = sys.argv

        self.schema.freeze()
        self._parsed = self.parser.parse(self.schema, argv)
        logger.info(
            f"Parsed {len(self._parsed.parameter_values)} parameters "
            f"and {len(self._parsed.option_values)} options"
        )
        return self._parsed

    def get_parameter(self, name: str) -> str:
        """
        Raises:
            UnknownParameterError: If the parameter was never declared
            ParserStateError: If parse() has not succeeded yet
        """
        if not self.schema.has_parameter(name):
            raise UnknownParameterError(name)
        return self._require_parsed().get_parameter(name)

    def get_option(self, flag: str) -> OptionValue:
        """
        Raises:
            UnknownOptionError: If the flag was never declared
            ParserStateError: If parse() has not succeeded yet
        """
        if not self.schema.has_option(flag):
            raise UnknownOptionError(flag)
        return self._require_parsed().get_option(flag)

    def has_option(self, flag: str) -> bool:
        if not self.schema.has_option(flag):
            raise UnknownOptionError(flag)
        return self._require_parsed().has_option(flag)

    def _require_parsed(self) -> ParsedArguments:
        if self._parsed is None:
            raise ParserStateError("The arguments have not been parsed. Call parse() first.")
        return self._parsed
