"""TaskService -- 任务创建/状态变更/查询业务逻辑

创建流程：
1. 按领域编码构造领域变体（CROP 需校验物料）
2. 运行创建流水线校验字段
3. 通过 TaskRepository 保存

状态变更流程：读取 -> 就地流转 -> 重新保存。
"""

from datetime import datetime

import structlog
from tania.core.creation import create_task
from tania.core.models import Task, TaskStatus, create_task_domain
from tania.core.store import StoreGroup

log = structlog.get_logger()


class TaskService:
    """任务业务服务"""

    def __init__(self, store_group: StoreGroup) -> None:
        self._stores = store_group

    async def create_task(
        self,
        title: str,
        description: str,
        due_date: datetime | None,
        priority: str,
        domain_code: str | None,
        category: str,
        asset_id: str | None = None,
        material_id: str | None = None,
    ) -> Task:
        """创建并保存任务

        Raises:
            TaskError: 领域构造或字段校验失败
            Exception: 存储或查询的基础设施错误
        """
        domain = await create_task_domain(
            domain_code, self._stores.query_service, material_id
        )
        task = await create_task(
            self._stores.query_service,
            title,
            description,
            due_date,
            priority,
            domain,
            category,
            asset_id,
        )

        result = await self._stores.task_repo.save(task)
        result.unwrap()

        log.info(
            "task_created",
            task_id=task.uid,
            domain=task.domain.code,
            category=task.category.value,
            priority=task.priority.value,
        )
        return task

    async def get_task(self, task_id: str) -> Task | None:
        """查询任务详情"""
        result = await self._stores.task_repo.find_by_id(task_id)
        return result.unwrap()

    async def list_tasks(self, status: str | None = None) -> list[Task]:
        """查询任务列表，支持按状态筛选，按 created_date 倒序"""
        result = await self._stores.task_repo.find_all()
        tasks: list[Task] = result.unwrap()
        if status:
            tasks = [t for t in tasks if t.status.value == status]
        return tasks

    async def change_status(
        self, task_id: str, status: TaskStatus | str
    ) -> Task | None:
        """流转任务状态并保存

        Returns:
            更新后的 Task，如果任务不存在返回 None

        Raises:
            TaskError: 目标状态未知
        """
        task = await self.get_task(task_id)
        if task is None:
            return None

        from_status = task.status
        task.change_status(status)

        if task.status == from_status:
            # 非法流转（含终态）不改变状态，也无需保存
            log.info(
                "task_status_change_ignored",
                task_id=task_id,
                status=from_status.value,
                requested=str(status),
            )
            return task

        result = await self._stores.task_repo.save(task)
        result.unwrap()

        log.info(
            "task_status_changed",
            task_id=task_id,
            from_status=from_status.value,
            to_status=task.status.value,
        )
        return task

    async def cancel_task(self, task_id: str) -> Task | None:
        return await self.change_status(task_id, TaskStatus.CANCELLED)

    async def complete_task(self, task_id: str) -> Task | None:
        return await self.change_status(task_id, TaskStatus.COMPLETED)

    async def set_task_as_due(self, task_id: str) -> Task | None:
        return await self.change_status(task_id, TaskStatus.DUE)
