"""
plugins/local/profile - 로컬 AWS 프로파일
"""

from core.registry import Entry

from .actions import ACTIONS
from .dao import RESOURCE, SERVICE, ProfileDAO, ProfileResource, load_profiles
from .render import ProfileRenderer

__all__ = [
    "ACTIONS",
    "ProfileDAO",
    "ProfileRenderer",
    "ProfileResource",
    "load_profiles",
    "register",
]


def register(registry, actions) -> None:
    # exec 액션만 있으므로 executor는 등록하지 않음
    registry.register_custom(SERVICE, RESOURCE, Entry(ProfileDAO, ProfileRenderer))
    actions.register(SERVICE, RESOURCE, ACTIONS)
