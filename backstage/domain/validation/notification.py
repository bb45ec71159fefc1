"""
Notification - Accumulate-all validation handler.

Keeps going after a failure so several independent checks can run and every
violation is reported at once.
"""

from __future__ import annotations

from typing import Optional, TypeVar, Union

from backstage.domain.exceptions.domain_error import DomainError
from backstage.domain.validation.error import Error
from backstage.domain.validation.handler import Validation, ValidationHandler

T = TypeVar("T")


class Notification(ValidationHandler):
    def __init__(self, errors: Optional[list[Error]] = None):
        self._errors: list[Error] = list(errors) if errors else []

    @classmethod
    def create(cls, error: Optional[Error] = None) -> Notification:
        return cls([error] if error is not None else None)

    def append(self, error: Union[Error, ValidationHandler]) -> Notification:
        if isinstance(error, ValidationHandler):
            self._errors.extend(error.errors)
        else:
            self._errors.append(error)
        return self

    def validate(self, validation: Validation[T]) -> Optional[T]:
        try:
            return validation()
        except DomainError as e:
            if e.errors:
                self._errors.extend(e.errors)
            else:
                self._errors.append(Error(str(e)))
        except Exception as e:
            self._errors.append(Error(str(e)))
        return None

    @property
    def errors(self) -> list[Error]:
        return list(self._errors)

    def __repr__(self) -> str:
        return f"Notification(errors={self._errors!r})"
