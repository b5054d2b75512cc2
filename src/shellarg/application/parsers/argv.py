"""Argv parser for short-flag options followed by trailing parameters."""

from typing import Sequence

from shellarg.application.parsers.result import ParsedArguments
from shellarg.application.parsers.schema import ArgumentSchema
from shellarg.domain.exceptions import (
    InsufficientParametersError,
    InvalidArgumentError,
    InvalidSwitchError,
    MissingOptionValueError,
    ParseError,
)
from shellarg.domain.types import OptionKind, OptionValue
from shellarg.logger import get_logger

logger = get_logger("parsers")


class ArgvParser:
    """
    Parser for ``program <options> parameter_1 ... parameter_n`` vectors.

    The last ``len(schema.parameters)`` arguments are the parameters; every
    argument between the program name and the parameters must be an option:

        -z value    input option, value in the next argument
        -zvalue     input option, value attached to the flag
        -rvf        one or more switches after a single dash
    """

    def parse(self, schema: ArgumentSchema, raw_args: Sequence[str]) -> ParsedArguments:
        """
        Parse a full argument vector against a schema.

        Examples:
            ['copy', '-r', '-z', 'out.zip', './src', './dst']
                -> parameters {'source': './src', 'destination': './dst'},
                   options {'r': True, 'z': 'out.zip'}

        Args:
            schema: Declared parameters and options
            raw_args: Argument vector with the program name at index 0

        Returns:
            ParsedArguments holding every parameter and the supplied options

        Raises:
            ParseError: On the first token that does not fit the schema
        """
        raw_args = [str(arg) for arg in raw_args]
        try:
            parameter_values = self._bind_parameters(schema, raw_args)
            option_values = self._scan_options(schema, raw_args)
        except ParseError as e:
            logger.debug(f"Failed to parse {raw_args[1:]!r}: {e}")
            raise

        return ParsedArguments(
            declared_parameters=schema.parameters,
            declared_options=schema.options,
            parameter_values=parameter_values,
            option_values=option_values,
        )

    def _bind_parameters(self, schema: ArgumentSchema, raw_args: list[str]) -> dict[str, str]:
        """
        Bind the trailing arguments to the declared parameter names.

        The program name at index 0 is never a parameter.
        """
        names = schema.parameters
        argc = len(raw_args)
        if argc - 1 < len(names):
            raise InsufficientParametersError(required=len(names), supplied=max(argc - 1, 0))

        first = argc - len(names)
        parameters: dict[str, str] = {}
        for offset, name in enumerate(names):
            parameters[name] = raw_args[first + offset]
            logger.debug(f"Parsed parameter '{name}' = '{parameters[name]}'")
        return parameters

    def _scan_options(self, schema: ArgumentSchema, raw_args: list[str]) -> dict[str, OptionValue]:
        """
        Scan the option region between the program name and the parameters.

        Returns:
            Mapping of supplied flags to True (switch) or their value (input)
        """
        options: dict[str, OptionValue] = {}
        end = len(raw_args) - len(schema.parameters)

        i = 1
        while i < end:
            arg = raw_args[i]

            # cannot start without a registered flag
            if len(arg) < 2 or arg[0] != "-" or not schema.has_option(arg[1]):
                raise InvalidArgumentError(arg)

            flag = arg[1]
            kind = schema.kind_of(flag)

            if kind is OptionKind.INPUT:
                if len(arg) == 2:
                    # solitary form (-z value): the next argument is the value
                    if i + 1 >= end:
                        raise MissingOptionValueError(flag)
                    options[flag] = raw_args[i + 1]
                    i += 1
                else:
                    options[flag] = arg[2:]
                logger.debug(f"Parsed input option '-{flag}' = '{options[flag]}'")
            elif kind is OptionKind.SWITCH:
                for switch in arg[1:]:
                    if not schema.is_switch(switch):
                        raise InvalidSwitchError(switch=switch, token=arg)
                    options[switch] = True
                    logger.debug(f"Parsed switch '-{switch}'")

            i += 1

        return options
