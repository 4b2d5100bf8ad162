"""Tagged success/failure results for registry operations."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from user_registry.errors import RegistryError, RegistryErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a value or the registry error that prevented producing it."""

    value: T | None = None
    error: RegistryError | None = None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: RegistryError) -> "Outcome[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> RegistryErrorKind | None:
        """Error kind of a failed outcome, None on success."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure.

        Raises:
            RegistryError: The subclass matching the failure kind
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
