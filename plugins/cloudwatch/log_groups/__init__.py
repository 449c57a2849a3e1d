"""
plugins/cloudwatch/log_groups - CloudWatch 로그 그룹
"""

from core.registry import Entry

from .actions import ACTIONS, execute_log_group_action
from .dao import RESOURCE, SERVICE, LogGroupDAO, LogGroupResource
from .render import LogGroupRenderer

__all__ = [
    "ACTIONS",
    "LogGroupDAO",
    "LogGroupRenderer",
    "LogGroupResource",
    "execute_log_group_action",
    "register",
]


def register(registry, actions) -> None:
    registry.register_custom(SERVICE, RESOURCE, Entry(LogGroupDAO, LogGroupRenderer))
    actions.register(SERVICE, RESOURCE, ACTIONS)
    actions.register_executor(SERVICE, RESOURCE, execute_log_group_action)
