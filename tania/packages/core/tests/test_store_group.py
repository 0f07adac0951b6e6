"""StoreGroup 工厂与数据库初始化测试"""

from tania.core.models import TaskDomainGeneral
from tania.core.query import InMemoryTaskQueryService, SqliteTaskQueryService
from tania.core.store import (
    InMemoryTaskRepository,
    SqliteTaskRepository,
    create_store_group,
)
from tania.core.store.sqlite_init import verify_wal_mode
from tania.core.creation import create_task


class TestCreateStoreGroup:
    async def test_sqlite_backend_creates_database(self, sqlite_store_group, tmp_db_path):
        group = sqlite_store_group
        assert tmp_db_path.exists()
        assert group.backend == "sqlite"
        assert isinstance(group.task_repo, SqliteTaskRepository)
        assert isinstance(group.query_service, SqliteTaskQueryService)
        assert await verify_wal_mode(group.conn)

    async def test_memory_backend_ignores_path(self, tmp_path):
        db_path = tmp_path / "unused.db"
        group = await create_store_group(str(db_path), backend="memory")
        assert group.backend == "memory"
        assert isinstance(group.task_repo, InMemoryTaskRepository)
        assert isinstance(group.query_service, InMemoryTaskQueryService)
        assert not db_path.exists()
        await group.close()

    async def test_data_survives_reopen(self, tmp_path):
        db_path = str(tmp_path / "tania.db")

        group = await create_store_group(db_path)
        task = await create_task(
            group.query_service,
            "Fix fence",
            "",
            None,
            "NORMAL",
            TaskDomainGeneral(),
            "GENERAL",
            None,
        )
        (await group.task_repo.save(task)).unwrap()
        await group.close()

        reopened = await create_store_group(db_path)
        try:
            found = (await reopened.task_repo.find_by_id(task.uid)).unwrap()
            assert found == task
        finally:
            await reopened.close()

    async def test_init_db_is_idempotent(self, db_conn):
        from tania.core.store import init_db

        await init_db(db_conn)
        cursor = await db_conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"
        )
        tables = [row[0] for row in await cursor.fetchall()]
        assert {"areas", "crops", "materials", "tasks"} <= set(tables)
