"""
plugins/sqs/queues - SQS 큐
"""

from core.registry import Entry

from .actions import ACTIONS, execute_queue_action
from .dao import RESOURCE, SERVICE, QueueDAO, QueueResource
from .render import QueueRenderer

__all__ = [
    "ACTIONS",
    "QueueDAO",
    "QueueRenderer",
    "QueueResource",
    "execute_queue_action",
    "register",
]


def register(registry, actions) -> None:
    registry.register_custom(SERVICE, RESOURCE, Entry(QueueDAO, QueueRenderer))
    actions.register(SERVICE, RESOURCE, ACTIONS)
    actions.register_executor(SERVICE, RESOURCE, execute_queue_action)
