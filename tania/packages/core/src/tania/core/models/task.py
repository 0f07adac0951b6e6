"""Task Domain Model

Task 由创建流水线（creation.create_task）校验后生成，
之后只通过显式的状态操作（cancel / complete / set_as_due）变更。
持久化由调用方通过 TaskRepository 完成。
"""

from datetime import datetime

from pydantic import BaseModel, Field

from ..exceptions import TaskError, TaskErrorCode
from .domain import TaskDomain
from .enums import (
    TERMINAL_STATES,
    TaskCategory,
    TaskDomainCode,
    TaskPriority,
    TaskStatus,
    validate_transition,
)


class Task(BaseModel):
    """Task 数据模型

    uid 创建后不可修改；status 仅按 VALID_TRANSITIONS 流转，
    不合法的流转（包括从终态出发）静默忽略。
    """

    uid: str = Field(frozen=True, description="唯一标识，ULID 格式")
    title: str = Field(description="任务标题")
    description: str = Field(default="", description="任务描述")
    created_date: datetime = Field(description="创建时间（UTC）")
    due_date: datetime | None = Field(default=None, description="截止时间")
    priority: TaskPriority = Field(description="优先级")
    category: TaskCategory = Field(description="任务分类")
    domain: TaskDomain = Field(description="绑定的资产领域")
    asset_id: str | None = Field(default=None, description="关联资产 ID")
    status: TaskStatus = Field(default=TaskStatus.CREATED, description="当前状态")

    @property
    def domain_code(self) -> TaskDomainCode:
        return TaskDomainCode(self.domain.code)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATES

    def change_status(self, status: TaskStatus | str) -> "Task":
        """就地流转状态并返回自身

        Raises:
            TaskError: 目标状态不是已知状态（INVALID_STATUS）
        """
        try:
            target = TaskStatus(status)
        except ValueError:
            raise TaskError(TaskErrorCode.INVALID_STATUS) from None

        if validate_transition(self.status, target):
            self.status = target
        return self

    def cancel(self) -> "Task":
        return self.change_status(TaskStatus.CANCELLED)

    def complete(self) -> "Task":
        return self.change_status(TaskStatus.COMPLETED)

    def set_as_due(self) -> "Task":
        return self.change_status(TaskStatus.DUE)
