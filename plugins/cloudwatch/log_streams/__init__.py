"""
plugins/cloudwatch/log_streams - CloudWatch 로그 스트림 (하위 리소스)
"""

from core.registry import Entry

from .actions import ACTIONS, execute_log_stream_action
from .dao import RESOURCE, SERVICE, LogStreamDAO, LogStreamResource
from .render import LogStreamRenderer

__all__ = [
    "ACTIONS",
    "LogStreamDAO",
    "LogStreamRenderer",
    "LogStreamResource",
    "execute_log_stream_action",
    "register",
]


def register(registry, actions) -> None:
    registry.register_custom(SERVICE, RESOURCE, Entry(LogStreamDAO, LogStreamRenderer))
    actions.register(SERVICE, RESOURCE, ACTIONS)
    actions.register_executor(SERVICE, RESOURCE, execute_log_stream_action)
