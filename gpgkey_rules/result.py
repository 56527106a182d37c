"""Result type for operations that report failures as values.

Loading a catalog, reading a configuration file or inspecting a key never
raises for bad input; each returns either a Success or a Failure.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
# Errors are plain strings in this package, but the type stays generic
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful operation with a value."""

    value: T

    def unwrap(self: "Success[T]") -> T:
        """Get the value."""
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed operation with an error."""

    error: E

    def unwrap(self: "Failure[E]") -> None:
        """Raise, since there is no value to return."""
        raise ValueError(f"Cannot unwrap Failure: {self.error}")


Result = Success[T] | Failure[E]
