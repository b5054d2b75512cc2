"""Read-only store of parsed parameter and option values."""

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping

from shellarg.domain.exceptions import UnknownOptionError, UnknownParameterError
from shellarg.domain.types import OptionKind, OptionValue


class FrozenMapping(Mapping[str, Any]):
    """Immutable, hashable copy of a mapping with hashable values."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None):
        object.__setattr__(self, "_data", dict(data or {}))

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __reduce__(self):
        return (type(self), (self._data,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


@dataclass(frozen=True)
class ParsedArguments:
    """Result of a single successful parse.

    Keeps a snapshot of the declared names so lookups are checked against
    the schema as it was when the vector was parsed. Every declared parameter
    must have a value and only declared flags may carry one.
    """

    declared_parameters: tuple[str, ...]
    declared_options: Mapping[str, OptionKind]
    parameter_values: Mapping[str, str]
    option_values: Mapping[str, OptionValue] = field(default_factory=FrozenMapping)

    def __post_init__(self) -> None:
        object.__setattr__(self, "declared_parameters", tuple(self.declared_parameters))
        object.__setattr__(self, "declared_options", FrozenMapping(self.declared_options))
        object.__setattr__(self, "parameter_values", FrozenMapping(self.parameter_values))
        object.__setattr__(self, "option_values", FrozenMapping(self.option_values))

        if set(self.parameter_values) != set(self.declared_parameters):
            missing = [name for name in self.declared_parameters if name not in self.parameter_values]
            extra = [name for name in self.parameter_values if name not in self.declared_parameters]
            raise ValueError(
                f"Parameter values must match the declared parameters (missing {missing}, undeclared {extra})."
            )
        undeclared = [flag for flag in self.option_values if flag not in self.declared_options]
        if undeclared:
            raise ValueError(f"Option values given for undeclared flags {undeclared}.")

    def get_parameter(self, name: str) -> str:
        """
        Get the value bound to a declared parameter.

        Raises:
            UnknownParameterError: If the parameter was never declared
        """
        if name not in self.declared_parameters:
            raise UnknownParameterError(name)
        return self.parameter_values[name]

    def get_option(self, flag: str) -> OptionValue:
        """
        Get the value of a declared option.

        Options are optional, so a flag the user left out returns None
        rather than raising. A supplied switch returns True and a supplied
        input returns its string value.

        Raises:
            UnknownOptionError: If the flag was never declared
        """
        if flag not in self.declared_options:
            raise UnknownOptionError(flag)
        return self.option_values.get(flag)

    def has_option(self, flag: str) -> bool:
        """True if the flag is declared and was supplied."""
        if flag not in self.declared_options:
            raise UnknownOptionError(flag)
        return flag in self.option_values

    def as_dict(self) -> dict[str, dict[str, OptionValue]]:
        return {
            "parameters": {name: self.parameter_values[name] for name in self.declared_parameters},
            "options": {flag: self.option_values.get(flag) for flag in self.declared_options},
        }
