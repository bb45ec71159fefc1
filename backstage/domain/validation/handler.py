"""
ValidationHandler - Strategy controlling how validation failures are reported.

Callers pick the strategy explicitly and pass it into a validator:

    notification = Notification()
    validate_work_order(work_order, notification)
    if notification.has_error():
        ...

    validate_work_order(work_order, FailFast())  # raises on the first problem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional, TypeVar, Union

from backstage.domain.validation.error import Error

T = TypeVar("T")

# A fallible computation: returns a T or raises.
Validation = Callable[[], T]


class ValidationHandler(ABC):
    @abstractmethod
    def append(self, error: Union[Error, ValidationHandler]) -> ValidationHandler:
        """Record an error, or merge every error held by another handler."""
        ...

    @abstractmethod
    def validate(self, validation: Validation[T]) -> Optional[T]:
        """Run a fallible computation under this handler's policy."""
        ...

    @property
    @abstractmethod
    def errors(self) -> list[Error]: ...

    def has_error(self) -> bool:
        return len(self.errors) > 0

    def first_error(self) -> Optional[Error]:
        errors = self.errors
        return errors[0] if errors else None
