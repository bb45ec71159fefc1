"""
WorkOrderItem Value Object - One line of a work order (what to prepare, how many).

Items are not validated: an upstream order may leave out either field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WorkOrderItem:
    name: Optional[str]
    quantity: Optional[int]

    @classmethod
    def create(cls, name: Optional[str], quantity: Optional[int]) -> WorkOrderItem:
        return cls(name=name, quantity=quantity)
