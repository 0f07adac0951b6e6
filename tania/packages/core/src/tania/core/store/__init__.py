"""Tania Core Store -- 任务仓储与资产查询的持久化实现

提供工厂函数创建共享同一后端的 Store 实例组。
"""

from pathlib import Path

import aiosqlite

from ..query import AssetRegistry, InMemoryTaskQueryService, SqliteTaskQueryService
from ..query.protocols import TaskQueryService
from .asset_store import SqliteAssetStore
from .memory_store import InMemoryTaskRepository
from .protocols import TaskRepository
from .sqlite_init import init_db
from .task_store import SqliteTaskRepository


class StoreGroup:
    """Store 实例组 -- 任务仓储与查询服务共享同一个后端"""

    def __init__(
        self,
        task_repo: TaskRepository,
        query_service: TaskQueryService,
        conn: aiosqlite.Connection | None = None,
        asset_registry: AssetRegistry | None = None,
    ) -> None:
        self.task_repo = task_repo
        self.query_service = query_service
        self.conn = conn
        self.asset_registry = asset_registry

    @property
    def backend(self) -> str:
        return "sqlite" if self.conn is not None else "memory"

    async def close(self) -> None:
        if self.conn is not None:
            await self.conn.close()


def create_memory_store_group(registry: AssetRegistry | None = None) -> StoreGroup:
    """创建内存 Store 实例组"""
    registry = registry or AssetRegistry()
    return StoreGroup(
        task_repo=InMemoryTaskRepository(),
        query_service=InMemoryTaskQueryService(registry),
        asset_registry=registry,
    )


async def create_store_group(db_path: str, backend: str = "sqlite") -> StoreGroup:
    """创建 Store 实例组

    Args:
        db_path: SQLite 数据库文件路径（memory 后端忽略）
        backend: "sqlite" 或 "memory"

    Returns:
        StoreGroup 实例
    """
    if backend == "memory":
        return create_memory_store_group()

    # 确保数据库目录存在
    db_dir = Path(db_path).parent
    db_dir.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(db_path)
    conn.row_factory = aiosqlite.Row
    await init_db(conn)

    return StoreGroup(
        task_repo=SqliteTaskRepository(conn),
        query_service=SqliteTaskQueryService(conn),
        conn=conn,
    )


__all__ = [
    "StoreGroup",
    "create_store_group",
    "create_memory_store_group",
    "TaskRepository",
    "SqliteTaskRepository",
    "InMemoryTaskRepository",
    "SqliteAssetStore",
    "init_db",
]
