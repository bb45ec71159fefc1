"""
NotificationError - Raised when one or more invariants fail at construction time.
Maps to: HTTP 422 Unprocessable Entity
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from backstage.domain.exceptions.domain_error import DomainError

if TYPE_CHECKING:
    from backstage.domain.validation.handler import ValidationHandler


class NotificationError(DomainError):
    """Validation failure carrying every violation collected by a handler."""

    def __init__(self, message: str, notification: ValidationHandler):
        super().__init__(message, notification.errors)
