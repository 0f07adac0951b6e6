"""Tania Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .domain import (
    TaskDomain,
    TaskDomainArea,
    TaskDomainCrop,
    TaskDomainFinance,
    TaskDomainGeneral,
    TaskDomainInventory,
    TaskDomainReservoir,
    create_task_domain,
    create_task_domain_area,
    create_task_domain_crop,
    create_task_domain_finance,
    create_task_domain_general,
    create_task_domain_inventory,
    create_task_domain_reservoir,
)
from .enums import (
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    TaskCategory,
    TaskDomainCode,
    TaskPriority,
    TaskStatus,
    validate_transition,
)
from .query import AreaSummary, CropSummary, MaterialSummary
from .task import Task

__all__ = [
    # 枚举
    "TaskStatus",
    "TaskPriority",
    "TaskCategory",
    "TaskDomainCode",
    # 状态机
    "VALID_TRANSITIONS",
    "TERMINAL_STATES",
    "validate_transition",
    # Task
    "Task",
    # 领域变体
    "TaskDomain",
    "TaskDomainArea",
    "TaskDomainCrop",
    "TaskDomainFinance",
    "TaskDomainGeneral",
    "TaskDomainInventory",
    "TaskDomainReservoir",
    "create_task_domain",
    "create_task_domain_area",
    "create_task_domain_crop",
    "create_task_domain_finance",
    "create_task_domain_general",
    "create_task_domain_inventory",
    "create_task_domain_reservoir",
    # 查询结果
    "AreaSummary",
    "CropSummary",
    "MaterialSummary",
]
