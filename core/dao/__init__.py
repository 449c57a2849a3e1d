"""
core/dao - Resource / DAO 계약

Example:
    from core.dao import BaseDAO, BaseResource, Operation
"""

from .base import (
    DAO,
    BaseDAO,
    BaseResource,
    DAOFactory,
    Operation,
    PaginatedDAO,
    ProfiledResource,
    RegionalResource,
    Resource,
    ensure_supported,
    get_resource_account_id,
    get_resource_profile,
    get_resource_region,
    is_paginated,
    unwrap_resource,
    wrap_with_profile,
    wrap_with_region,
)

__all__: list[str] = [
    "DAO",
    "BaseDAO",
    "BaseResource",
    "DAOFactory",
    "Operation",
    "PaginatedDAO",
    "ProfiledResource",
    "RegionalResource",
    "Resource",
    "ensure_supported",
    "get_resource_account_id",
    "get_resource_profile",
    "get_resource_region",
    "is_paginated",
    "unwrap_resource",
    "wrap_with_profile",
    "wrap_with_region",
]
