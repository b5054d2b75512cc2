"""Application layer - schema registry, argv parser and the argument set facade."""

from shellarg.application.arguments import CommandLineArguments

__all__ = ["CommandLineArguments"]
