"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

- work_order_port.py   → WorkOrderPort (persistence, Redis)
- notification_port.py → NotificationPort (status broadcast, Redis Streams)
"""

from backstage.domain.ports.work_order_port import WorkOrderPort
from backstage.domain.ports.notification_port import NotificationPort

__all__ = [
    "WorkOrderPort",
    "NotificationPort",
]
