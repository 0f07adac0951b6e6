"""Tania Core Query -- 跨聚合资产查询服务"""

from .inmemory import AssetRegistry, InMemoryTaskQueryService
from .protocols import TaskQueryService
from .sqlite import SqliteTaskQueryService

__all__ = [
    "TaskQueryService",
    "AssetRegistry",
    "InMemoryTaskQueryService",
    "SqliteTaskQueryService",
]
