"""Explicit success / failure values returned by the services."""

from dataclasses import dataclass

from app.errors.blog import ServiceError


@dataclass(frozen=True, slots=True)
class ServiceResult[T]:
    """
    Outcome of a service operation.

    Exactly one of ``value`` and ``error`` is meaningful: ``error`` is set
    on failure and ``value`` is only read when ``ok`` is true.
    """

    value: T | None = None
    error: ServiceError | None = None

    @property
    def ok(self) -> bool:
        """True when the operation succeeded."""
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ServiceError) -> "ServiceResult[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        """
        Return the value, raising the error on failure.

        Raises:
            ServiceError: If the operation failed
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
