"""Store Protocol 接口定义

定义 TaskRepository 的抽象接口，使用 Python Protocol 实现结构化子类型。
所有方法返回可 await 的 ResultChannel，结果为一次投递的 ServiceResult。
"""

from collections.abc import Awaitable
from typing import Protocol

from ..models.task import Task
from ..result import ServiceResult


class TaskRepository(Protocol):
    """Task 仓储接口

    实现方负责自身的并发写入约束：
    同一 uid 的 save 之后 find_by_id 可见（read-your-writes），
    不同 uid 的并发 save 互不影响。
    """

    def save(self, task: Task) -> Awaitable[ServiceResult]:
        """保存（新增或覆盖）任务，成功值为 None"""
        ...

    def find_by_id(self, uid: str) -> Awaitable[ServiceResult]:
        """根据 uid 查询任务，成功值为 Task | None"""
        ...

    def find_all(self) -> Awaitable[ServiceResult]:
        """查询全部任务，成功值为 list[Task]，按 created_date 倒序"""
        ...
