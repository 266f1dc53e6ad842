# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argtree.

Schema problems are raised while a Command tree is declared or initialized.
Parse-time problems are raised by `parse_args()` and by `Value.set()`; each one
carries the offending token and the identity of the argument involved so the
caller can report it.

Exception Hierarchy:
- ArgTreeError
    ├── SchemaError
    ├── CommandNotInitializedError
    ├── ValueNotSetError
    ├── TypeMismatchError
    └── CommandArgumentError
        ├── ParseError
        │   ├── CannotParseArgToValue
        │   └── NumericParseError
        ├── InvalidValueError
        ├── ArityError
        │   ├── MissingValueError
        │   ├── MissingSubCommandError
        │   ├── MissingOptionValueError
        │   └── TooManyValuesError
        └── ClassificationError
            ├── UnexpectedArgumentError
            ├── UnrecognizedOptionError
            └── TooManyValuesError
"""
from __future__ import annotations


class ArgTreeError(Exception):
    """Base exception for argtree."""


class SchemaError(ArgTreeError):
    """Raised when a Command tree violates its declaration invariants."""


class CommandNotInitializedError(ArgTreeError):
    """Raised when a runtime-only operation is used on an uninitialized Command."""


class ValueNotSetError(ArgTreeError):
    """Raised when a Value without a default is read before it was set."""


class TypeMismatchError(ArgTreeError):
    """Raised when a Value is read as a type other than its own."""


class CommandArgumentError(ArgTreeError):
    """Base class for every failure raised while parsing tokens."""

    def __init__(
        self,
        message: str,
        token: str | None = None,
        argument: str | None = None,
    ) -> None:
        super().__init__(message)
        self.token = token
        self.argument = argument


class ParseError(CommandArgumentError):
    """Raised when a token cannot be coerced to the target type."""


class CannotParseArgToValue(ParseError):
    """Raised when a custom parse function fails or no parse function exists."""


class NumericParseError(ParseError, ValueError):
    """Raised when the built-in integer or float coercion fails."""


class InvalidValueError(CommandArgumentError):
    """Raised when a parsed value is rejected by its validator."""


class ArityError(CommandArgumentError):
    """Raised when the number of supplied arguments does not fit the schema."""


class MissingValueError(ArityError):
    """Raised when a mandatory Value was not supplied."""


class MissingSubCommandError(ArityError):
    """Raised when a mandatory sub Command was not supplied."""


class MissingOptionValueError(ArityError):
    """Raised when an Option that needs a value was given none."""


class ClassificationError(CommandArgumentError):
    """Raised when a token matches no Option, sub Command, or Value."""


class UnexpectedArgumentError(ClassificationError):
    """Raised when a positional token is given to a Command without Values."""


class UnrecognizedOptionError(ClassificationError):
    """Raised when a prefixed token matches no known Option."""


class TooManyValuesError(ArityError, ClassificationError):
    """Raised when a positional token arrives after every Value is full."""
