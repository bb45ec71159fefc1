"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.

Invalid arguments (e.g. an unknown status token) are plain ValueErrors.
"""

from backstage.domain.exceptions.domain_error import DomainError
from backstage.domain.exceptions.notification_error import NotificationError
from backstage.domain.exceptions.not_found import NotFoundError
from backstage.domain.exceptions.internal_error import InternalError

__all__ = [
    "DomainError",
    "NotificationError",
    "NotFoundError",
    "InternalError",
]
