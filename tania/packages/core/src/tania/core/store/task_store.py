"""TaskRepository SQLite 实现

领域变体以 JSON 存入 domain_details 列，domain_code 冗余存储便于筛选。
写入通过 asyncio.Lock 串行化，每次 save 独立提交。
created_date 一律以 UTC 文本存储，find_all 直接按该列排序。

注意：save 的 commit / rollback 作用于整个共享连接，
同一连接上尚未提交的 SqliteAssetStore 写入会随之提交或回滚。
"""

import asyncio
from datetime import UTC, datetime

import aiosqlite
import structlog
from pydantic import TypeAdapter

from ..models.domain import TaskDomain
from ..models.task import Task
from ..result import ResultChannel

log = structlog.get_logger()

_domain_adapter: TypeAdapter[TaskDomain] = TypeAdapter(TaskDomain)


def _utc_text(value: datetime) -> str:
    """统一换算为 UTC 并保留微秒，保证按文本排序即按时间排序"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="microseconds")


class SqliteTaskRepository:
    """TaskRepository 的 SQLite 实现"""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn
        self._write_lock = asyncio.Lock()

    def save(self, task: Task) -> ResultChannel:
        return ResultChannel.from_coroutine(self._save(task))

    def find_by_id(self, uid: str) -> ResultChannel:
        return ResultChannel.from_coroutine(self._find_by_id(uid))

    def find_all(self) -> ResultChannel:
        return ResultChannel.from_coroutine(self._find_all())

    async def _save(self, task: Task) -> None:
        """新增或覆盖任务记录"""
        async with self._write_lock:
            try:
                await self._conn.execute(
                    """
                    INSERT INTO tasks (uid, title, description, created_date, due_date,
                                       priority, category, domain_code, domain_details,
                                       asset_id, status)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    ON CONFLICT(uid) DO UPDATE SET
                        title = excluded.title,
                        description = excluded.description,
                        due_date = excluded.due_date,
                        priority = excluded.priority,
                        category = excluded.category,
                        domain_code = excluded.domain_code,
                        domain_details = excluded.domain_details,
                        asset_id = excluded.asset_id,
                        status = excluded.status
                    """,
                    (
                        task.uid,
                        task.title,
                        task.description,
                        _utc_text(task.created_date),
                        task.due_date.isoformat() if task.due_date else None,
                        task.priority.value,
                        task.category.value,
                        task.domain_code.value,
                        task.domain.model_dump_json(),
                        task.asset_id,
                        task.status.value,
                    ),
                )
                await self._conn.commit()
            except Exception:
                await self._conn.rollback()
                log.error("task_save_failed", task_id=task.uid)
                raise

    async def _find_by_id(self, uid: str) -> Task | None:
        cursor = await self._conn.execute(
            "SELECT * FROM tasks WHERE uid = ?",
            (uid,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_task(row)

    async def _find_all(self) -> list[Task]:
        cursor = await self._conn.execute(
            "SELECT * FROM tasks ORDER BY created_date DESC"
        )
        rows = await cursor.fetchall()
        return [self._row_to_task(row) for row in rows]

    @staticmethod
    def _row_to_task(row: aiosqlite.Row) -> Task:
        """将数据库行转换为 Task 模型"""
        return Task(
            uid=row[0],
            title=row[1],
            description=row[2],
            created_date=datetime.fromisoformat(row[3]),
            due_date=datetime.fromisoformat(row[4]) if row[4] else None,
            priority=row[5],
            category=row[6],
            domain=_domain_adapter.validate_json(row[8]),
            asset_id=row[9],
            status=row[10],
        )
