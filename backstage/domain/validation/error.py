"""
Error Value Object - A single validation message.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Error:
    message: str

    def __str__(self) -> str:
        return self.message
