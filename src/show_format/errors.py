"""Exception classes and result objects used throughout the show format
package.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

__all__ = (
    "ErrorKind",
    "MalformedContainerError",
    "MissingEntryError",
    "Result",
    "ShowFormatError",
    "ShowValidationError",
)


T = TypeVar("T")


class ErrorKind(Enum):
    """Enumeration describing the possible kinds of failures when validating
    or loading a show.
    """

    MISSING_FIELD = "missingField"
    """A required field (version, drones, trajectory) is absent."""

    INVALID_VALUE = "invalidValue"
    """A field is present but has the wrong type or an unrecognized value."""

    LIMIT_EXCEEDED = "limitExceeded"
    """The show has more drones than the configured maximum."""

    MALFORMED_CONTAINER = "malformedContainer"
    """The compiled show file cannot be opened or parsed."""

    MISSING_ENTRY = "missingEntry"
    """The compiled show file lacks an expected entry."""


class ShowFormatError(RuntimeError):
    """Base class for all errors raised by the show format package."""

    kind: ErrorKind
    """The kind of the error."""

    path: Optional[str]
    """Dotted path of the offending field in the show specification, or the
    name of the offending entry in a compiled show file. ``None`` if the error
    refers to the document as a whole.
    """

    default_kind: ErrorKind = ErrorKind.INVALID_VALUE

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        kind: Optional[ErrorKind] = None,
        path: Optional[str] = None,
    ):
        """Constructor.

        Parameters:
            message: the error message
            kind: the kind of the error; defaults to the default kind of the
                exception class
            path: path of the offending field or entry
        """
        message = message or "Invalid show file"
        super().__init__(message)
        self.kind = kind or self.default_kind
        self.path = path

    @property
    def message(self) -> str:
        """The human-readable error message."""
        return str(self.args[0])


class ShowValidationError(ShowFormatError):
    """Exception raised when a show specification fails validation."""

    pass


class MalformedContainerError(ShowFormatError):
    """Exception raised when a compiled show file cannot be parsed as a
    valid container.
    """

    default_kind = ErrorKind.MALFORMED_CONTAINER


class MissingEntryError(ShowFormatError):
    """Exception raised when a compiled show file lacks an entry that it is
    expected to contain.
    """

    default_kind = ErrorKind.MISSING_ENTRY


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation that either produced a value or failed with
    an error.
    """

    value: Optional[T] = None
    """The value produced by the operation if it succeeded."""

    error: Optional[ShowFormatError] = None
    """The error that the operation failed with; ``None`` if it succeeded."""

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ShowFormatError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """Whether the operation succeeded."""
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """The kind of the error if the operation failed, ``None`` otherwise."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        """Returns the value of the result or raises the error that the
        operation failed with.
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore
