"""
DomainError - Base of every domain failure.

Carries the ordered list of validation Errors that caused it (possibly empty).
Maps to: HTTP 422 Unprocessable Entity unless a subclass says otherwise.
"""

from __future__ import annotations

from typing import Optional

from backstage.domain.validation.error import Error


class DomainError(Exception):
    """Exception raised when a business rule is violated."""

    def __init__(self, message: str, errors: Optional[list[Error]] = None):
        super().__init__(message)
        self.message = message
        self.errors: list[Error] = list(errors) if errors else []

    @classmethod
    def with_error(cls, error: Error) -> DomainError:
        return cls(error.message, [error])

    @classmethod
    def with_errors(cls, errors: list[Error]) -> DomainError:
        return cls("", errors)
