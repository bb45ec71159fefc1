"""
AggregateKind - Tag naming an aggregate type in user-facing messages.
"""

from enum import Enum


class AggregateKind(Enum):
    WORK_ORDER = "workorder"

    @property
    def label(self) -> str:
        return self.value
