"""
plugins/cloudformation/resources - 스택 리소스 (하위 리소스)
"""

from core.registry import Entry

from .dao import RESOURCE, SERVICE, StackResourceDAO, StackResourceResource
from .render import (
    StackResourceRenderer,
    extract_filter_value,
    get_filter_field,
    parse_cfn_resource_type,
)

__all__ = [
    "StackResourceDAO",
    "StackResourceRenderer",
    "StackResourceResource",
    "extract_filter_value",
    "get_filter_field",
    "parse_cfn_resource_type",
    "register",
]


def register(registry, actions) -> None:
    registry.register_custom(SERVICE, RESOURCE, Entry(StackResourceDAO, StackResourceRenderer))
