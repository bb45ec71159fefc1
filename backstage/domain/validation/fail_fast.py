"""
FailFast - Validation handler that raises on the first problem.

Holds no state: every failure is raised immediately as a DomainError, so
`errors` is always empty.
"""

from __future__ import annotations

from typing import Optional, TypeVar, Union

from backstage.domain.exceptions.domain_error import DomainError
from backstage.domain.validation.error import Error
from backstage.domain.validation.handler import Validation, ValidationHandler

T = TypeVar("T")


class FailFast(ValidationHandler):
    def append(self, error: Union[Error, ValidationHandler]) -> ValidationHandler:
        if isinstance(error, ValidationHandler):
            raise DomainError.with_errors(error.errors)
        raise DomainError.with_error(error)

    def validate(self, validation: Validation[T]) -> Optional[T]:
        try:
            return validation()
        except Exception as e:
            raise DomainError.with_error(Error(str(e))) from e

    @property
    def errors(self) -> list[Error]:
        return []
