"""
plugins/cloudformation/stacks - CloudFormation 스택
"""

from core.registry import Entry

from .actions import ACTIONS, execute_stack_action
from .dao import RESOURCE, SERVICE, StackDAO, StackResource
from .render import StackRenderer

__all__ = [
    "ACTIONS",
    "StackDAO",
    "StackRenderer",
    "StackResource",
    "execute_stack_action",
    "register",
]


def register(registry, actions) -> None:
    registry.register_custom(SERVICE, RESOURCE, Entry(StackDAO, StackRenderer))
    actions.register(SERVICE, RESOURCE, ACTIONS)
    actions.register_executor(SERVICE, RESOURCE, execute_stack_action)
