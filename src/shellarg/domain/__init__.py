"""Domain layer - argument types, errors and parser protocol with zero external dependencies.

This layer contains:
- types: OptionKind and OptionValue
- exceptions: Parse, lookup, schema and state errors
- protocols: The ArgumentParser interface

The domain layer has no runtime dependencies on the application layer; the
parser protocol names the schema and result types for type checking only.
"""
