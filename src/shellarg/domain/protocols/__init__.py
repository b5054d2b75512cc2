"""Domain protocols - interfaces for all implementations.

This module defines protocols (structural types) that describe the contracts
that parser implementations must satisfy, so the facade can be driven by any
parser and tests can substitute their own.
"""

from shellarg.domain.protocols.parser import ArgumentParser

__all__ = [
    "ArgumentParser",
]
