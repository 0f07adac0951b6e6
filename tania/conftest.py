"""全局 pytest 配置 -- 临时 SQLite 数据库与 StoreGroup fixture"""

from collections.abc import AsyncGenerator
from pathlib import Path

import aiosqlite
import pytest
import pytest_asyncio
from tania.core.store import StoreGroup, create_store_group, init_db


@pytest.fixture
def tmp_db_path(tmp_path: Path) -> Path:
    """临时数据库路径，位于尚不存在的子目录下"""
    return tmp_path / "sqlite" / "tania.db"


@pytest_asyncio.fixture
async def db_conn(tmp_path: Path) -> AsyncGenerator[aiosqlite.Connection, None]:
    """已建表的裸连接，供直接测试仓储与查询实现"""
    conn = await aiosqlite.connect(str(tmp_path / "conn.db"))
    await init_db(conn)
    yield conn
    await conn.close()


@pytest_asyncio.fixture
async def sqlite_store_group(tmp_db_path: Path) -> AsyncGenerator[StoreGroup, None]:
    """SQLite 后端的 StoreGroup，测试结束时关闭连接"""
    group = await create_store_group(str(tmp_db_path))
    yield group
    await group.close()
