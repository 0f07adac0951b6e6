"""枚举定义

包含 TaskStatus 状态机、TaskPriority、TaskCategory、TaskDomainCode 枚举，
以及 VALID_TRANSITIONS 合法流转映射和 TERMINAL_STATES 终态集合。
"""

from enum import StrEnum


class TaskStatus(StrEnum):
    """Task 状态机"""

    CREATED = "CREATED"
    DUE = "DUE"

    # 终态
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


# 合法状态流转：均为显式操作，不存在自动流转
VALID_TRANSITIONS: dict[TaskStatus, set[TaskStatus]] = {
    TaskStatus.CREATED: {
        TaskStatus.DUE,
        TaskStatus.CANCELLED,
        TaskStatus.COMPLETED,
    },
    TaskStatus.DUE: {TaskStatus.CANCELLED, TaskStatus.COMPLETED},
    # 终态不可再流转
    TaskStatus.CANCELLED: set(),
    TaskStatus.COMPLETED: set(),
}

TERMINAL_STATES: set[TaskStatus] = {
    TaskStatus.CANCELLED,
    TaskStatus.COMPLETED,
}


class TaskPriority(StrEnum):
    """任务优先级（大小写敏感）"""

    NORMAL = "NORMAL"
    URGENT = "URGENT"


class TaskCategory(StrEnum):
    """任务分类"""

    AREA = "AREA"
    CROP = "CROP"
    FINANCE = "FINANCE"
    GENERAL = "GENERAL"
    INVENTORY = "INVENTORY"
    NUTRIENT = "NUTRIENT"
    PESTCONTROL = "PESTCONTROL"
    RESERVOIR = "RESERVOIR"
    SAFETY = "SAFETY"
    SANITATION = "SANITATION"
    WATERING = "WATERING"
    HARVESTING = "HARVESTING"


class TaskDomainCode(StrEnum):
    """任务绑定的资产领域"""

    AREA = "AREA"
    CROP = "CROP"
    FINANCE = "FINANCE"
    GENERAL = "GENERAL"
    INVENTORY = "INVENTORY"
    RESERVOIR = "RESERVOIR"


def validate_transition(from_status: TaskStatus, to_status: TaskStatus) -> bool:
    """验证状态流转是否合法

    Args:
        from_status: 当前状态
        to_status: 目标状态

    Returns:
        True 如果流转合法，否则 False
    """
    allowed = VALID_TRANSITIONS.get(from_status, set())
    return to_status in allowed
