"""TaskRepository 内存实现

以 dict 作为共享存储，asyncio.Lock 串行化写入。
存取均使用深拷贝：调用方在 save 之前对 Task 的就地修改不会泄漏到存储中。
"""

import asyncio

from ..models.task import Task
from ..result import ResultChannel


class InMemoryTaskRepository:
    """TaskRepository 的内存实现"""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = asyncio.Lock()

    def save(self, task: Task) -> ResultChannel:
        return ResultChannel.from_coroutine(self._save(task))

    def find_by_id(self, uid: str) -> ResultChannel:
        return ResultChannel.from_coroutine(self._find_by_id(uid))

    def find_all(self) -> ResultChannel:
        return ResultChannel.from_coroutine(self._find_all())

    async def _save(self, task: Task) -> None:
        async with self._lock:
            self._tasks[task.uid] = task.model_copy(deep=True)

    async def _find_by_id(self, uid: str) -> Task | None:
        async with self._lock:
            task = self._tasks.get(uid)
            return task.model_copy(deep=True) if task else None

    async def _find_all(self) -> list[Task]:
        async with self._lock:
            tasks = [t.model_copy(deep=True) for t in self._tasks.values()]
        return sorted(tasks, key=lambda t: t.created_date, reverse=True)
