"""
ValidationResult - Either a valid value or the ordered list of violations.

Returned by the non-raising factories (e.g. WorkOrder.try_create) so callers
can branch on validity without catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from backstage.domain.exceptions.domain_error import DomainError
from backstage.domain.validation.error import Error
from backstage.domain.validation.handler import ValidationHandler

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    value: Optional[T] = None
    errors: tuple[Error, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def ok(cls, value: T) -> ValidationResult[T]:
        return cls(value=value)

    @classmethod
    def failed(cls, errors: list[Error]) -> ValidationResult[T]:
        return cls(value=None, errors=tuple(errors))

    @classmethod
    def from_handler(
        cls, value: Optional[T], handler: ValidationHandler
    ) -> ValidationResult[T]:
        if handler.has_error():
            return cls.failed(handler.errors)
        return cls.ok(value)

    def unwrap(self) -> T:
        """Return the value; raise a DomainError carrying every violation otherwise."""
        if self.errors:
            raise DomainError.with_errors(list(self.errors))
        return self.value
