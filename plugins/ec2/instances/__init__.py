"""
plugins/ec2/instances - EC2 인스턴스
"""

from core.registry import Entry

from .actions import ACTIONS, execute_instance_action
from .dao import RESOURCE, SERVICE, InstanceDAO, InstanceResource
from .render import InstanceRenderer

__all__ = [
    "ACTIONS",
    "InstanceDAO",
    "InstanceRenderer",
    "InstanceResource",
    "execute_instance_action",
    "register",
]


def register(registry, actions) -> None:
    """DAO/Renderer/액션 등록"""
    registry.register_custom(SERVICE, RESOURCE, Entry(InstanceDAO, InstanceRenderer))
    actions.register(SERVICE, RESOURCE, ACTIONS)
    actions.register_executor(SERVICE, RESOURCE, execute_instance_action)
