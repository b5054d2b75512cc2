"""Domain exceptions raised while declaring, parsing and reading arguments."""

__all__ = [
    "ArgumentError",
    "ParseError",
    "InsufficientParametersError",
    "InvalidArgumentError",
    "MissingOptionValueError",
    "InvalidSwitchError",
    "ArgumentLookupError",
    "UnknownParameterError",
    "UnknownOptionError",
    "SchemaError",
    "ParserStateError",
]


class ArgumentError(Exception):
    """Base class for all shellarg errors."""


class ParseError(ArgumentError):
    """Raised when the supplied argument vector does not match the schema."""


class InsufficientParametersError(ParseError):
    """Fewer arguments were supplied than there are declared parameters."""

    def __init__(self, required: int, supplied: int):
        self.required = required
        self.supplied = supplied
        super().__init__(f"The command requires {required} parameters.")


class InvalidArgumentError(ParseError):
    """A token in the option region is not a registered flag."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f'Invalid argument "{token}".')


class MissingOptionValueError(ParseError):
    """A solitary input flag has no following token to use as its value."""

    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f'Parameter does not follow the option "{flag}".')


class InvalidSwitchError(ParseError):
    """A character inside a combined switch token is not a registered switch."""

    def __init__(self, switch: str, token: str):
        self.switch = switch
        self.token = token
        super().__init__(f'An invalid switch "{switch}" was provided.')


class ArgumentLookupError(ArgumentError, LookupError):
    """Raised when looking up a name or flag the schema never declared."""


class UnknownParameterError(ArgumentLookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f'The parameter "{name}" does not exist.')


class UnknownOptionError(ArgumentLookupError):
    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f'The option "{flag}" does not exist.')


class SchemaError(ArgumentError, ValueError):
    """Raised when a parameter or option cannot be registered."""


class ParserStateError(ArgumentError, RuntimeError):
    """Raised when the argument set is used out of order (read before parse, parse twice)."""
