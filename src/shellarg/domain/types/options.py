"""Option-related domain types."""

from enum import Enum
from typing import Union

__all__ = ["OptionKind", "OptionValue"]


class OptionKind(Enum):
    """Kind of a single-character option flag.

    A switch is a pure presence flag and never consumes a value. An input
    requires a string value, attached to the flag (``-zfile.zip``) or taken
    from the next argument (``-z file.zip``).
    """

    SWITCH = "switch"
    INPUT = "input"

    @classmethod
    def coerce(cls, kind: "OptionKind | str") -> "OptionKind":
        """Return ``kind`` as an OptionKind, accepting its value or name.

        Raises:
            ValueError: If ``kind`` names neither a switch nor an input
        """
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            lowered = kind.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        raise ValueError(f"Unknown option kind {kind!r}; expected 'switch' or 'input'")


# True for a supplied switch, the value for a supplied input, None when omitted
OptionValue = Union[str, bool, None]
