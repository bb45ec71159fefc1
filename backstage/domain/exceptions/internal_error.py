"""
InternalError - Raised by adapters for infrastructure faults (serialization,
mapping stored records back into the domain). Chain the original cause with
`raise InternalError(...) from e`.
Maps to: HTTP 500 Internal Server Error
"""

from backstage.domain.exceptions.domain_error import DomainError


class InternalError(DomainError):
    """Exception raised when an adapter cannot complete an operation."""
