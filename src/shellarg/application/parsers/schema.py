"""Schema registry for declared parameters and option flags."""

from types import MappingProxyType
from typing import Iterable, Mapping

from shellarg.domain.exceptions import SchemaError
from shellarg.domain.types import OptionKind
from shellarg.logger import get_logger

logger = get_logger("parsers")


class ArgumentSchema:
    """
    Ordered parameter names plus the single-character option flags.

    Parameters are bound from the tail of the argument vector, so their
    declaration order matters: the last declared name receives the last
    argument. Options map one flag character to its OptionKind.

    Example:
        >>> schema = ArgumentSchema()
        >>> schema.add_parameters(["source", "destination"])
        >>> schema.add_options({"r": OptionKind.SWITCH, "z": OptionKind.INPUT})
        >>> schema.parameters
        ('source', 'destination')
        >>> schema.is_input("z")
        True
    """

    def __init__(self) -> None:
        self._parameters: list[str] = []
        self._options: dict[str, OptionKind] = {}
        self._frozen = False

    @property
    def parameters(self) -> tuple[str, ...]:
        return tuple(self._parameters)

    @property
    def options(self) -> Mapping[str, OptionKind]:
        return MappingProxyType(self._options)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject any further registration."""
        self._frozen = True

    def add_parameters(self, names: Iterable[str]) -> None:
        """
        Add parameter names in order.

        Args:
            names: The parameter names, in command line order
        """
        for name in names:
            self.add_parameter(name)

    def add_parameter(self, name: str) -> None:
        """
        Append a required parameter.

        Args:
            name: The parameter name

        Raises:
            SchemaError: If the schema is frozen or the name is already declared
        """
        self._ensure_mutable()
        name = str(name)
        if name in self._parameters:
            raise SchemaError(f'The parameter "{name}" is already declared.')
        self._parameters.append(name)
        logger.debug(f"Registered parameter '{name}' at position {len(self._parameters)}")

    def add_options(self, options: Mapping[str, "OptionKind | str"]) -> None:
        """
        Add options from a flag -> kind mapping.

        Args:
            options: Mapping of single-character flags to their kind
        """
        for flag, kind in options.items():
            self.add_option(flag, kind)

    def add_option(self, flag: str, kind: "OptionKind | str") -> None:
        """
        Register an option flag. Registering a flag again replaces its kind.

        Args:
            flag: A single printable character other than '-'
            kind: OptionKind.SWITCH or OptionKind.INPUT (or "switch" / "input")

        Raises:
            SchemaError: If the schema is frozen, the flag is malformed or the kind is unknown
        """
        self._ensure_mutable()
        flag = str(flag)
        if len(flag) != 1 or flag == "-" or not flag.isprintable() or flag.isspace():
            raise SchemaError(f"Invalid option flag {flag!r}; expected a single character other than '-'.")
        try:
            option_kind = OptionKind.coerce(kind)
        except ValueError as e:
            raise SchemaError(str(e)) from e

        previous = self._options.get(flag)
        if previous is not None and previous is not option_kind:
            logger.debug(f"Option '-{flag}' redeclared: {previous.value} -> {option_kind.value}")
        self._options[flag] = option_kind
        logger.debug(f"Registered option '-{flag}' as {option_kind.value}")

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    def has_option(self, flag: str) -> bool:
        return flag in self._options

    def kind_of(self, flag: str) -> OptionKind | None:
        return self._options.get(flag)

    def is_switch(self, flag: str) -> bool:
        return self._options.get(flag) is OptionKind.SWITCH

    def is_input(self, flag: str) -> bool:
        return self._options.get(flag) is OptionKind.INPUT

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise SchemaError("The schema cannot change after the arguments were parsed.")

    def __repr__(self) -> str:
        options = {flag: kind.value for flag, kind in self._options.items()}
        return f"ArgumentSchema(parameters={self._parameters!r}, options={options!r})"
