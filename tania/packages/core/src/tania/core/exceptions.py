"""Task 异常体系

字段校验错误与领域构造错误共用 TaskError 基类，
HTTP 层按 code 映射为客户端错误信息。
"""

from enum import StrEnum


class TaskErrorCode(StrEnum):
    """Task 错误码"""

    # 字段校验
    TITLE_EMPTY = "TITLE_EMPTY"
    DUE_DATE_INVALID = "DUE_DATE_INVALID"
    PRIORITY_EMPTY = "PRIORITY_EMPTY"
    INVALID_PRIORITY = "INVALID_PRIORITY"
    CATEGORY_EMPTY = "CATEGORY_EMPTY"
    INVALID_CATEGORY = "INVALID_CATEGORY"
    INVALID_ASSET_ID = "INVALID_ASSET_ID"

    # 领域绑定
    DOMAIN_EMPTY = "DOMAIN_EMPTY"
    INVALID_DOMAIN = "INVALID_DOMAIN"
    MATERIAL_ID_EMPTY = "MATERIAL_ID_EMPTY"

    # 状态机
    INVALID_STATUS = "INVALID_STATUS"


_MESSAGES: dict[TaskErrorCode, str] = {
    TaskErrorCode.TITLE_EMPTY: "Task title is required",
    TaskErrorCode.DUE_DATE_INVALID: "Task due date must not be in the past",
    TaskErrorCode.PRIORITY_EMPTY: "Task priority is required",
    TaskErrorCode.INVALID_PRIORITY: "Task priority is invalid",
    TaskErrorCode.CATEGORY_EMPTY: "Task category is required",
    TaskErrorCode.INVALID_CATEGORY: "Task category is invalid",
    TaskErrorCode.INVALID_ASSET_ID: "Asset does not exist",
    TaskErrorCode.DOMAIN_EMPTY: "Task domain is required",
    TaskErrorCode.INVALID_DOMAIN: "Task domain is invalid",
    TaskErrorCode.MATERIAL_ID_EMPTY: "Inventory id is required for crop tasks",
    TaskErrorCode.INVALID_STATUS: "Task status is invalid",
}


class TaskError(Exception):
    """Task 校验异常基类

    两个 TaskError 的 code 相同即视为相等，便于测试直接比较。
    """

    def __init__(self, code: TaskErrorCode, message: str | None = None) -> None:
        """
        Args:
            code: 错误码
            message: 面向客户端的错误描述，缺省时按 code 取默认文案
        """
        self.code = TaskErrorCode(code)
        self.message = message or _MESSAGES[self.code]
        super().__init__(self.message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskError):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code.value!r})"


class TaskDomainError(TaskError):
    """领域变体构造失败（所需的外部资产不存在或缺少必填字段）"""


class ResultAlreadyDeliveredError(RuntimeError):
    """一次性结果通道被重复投递"""

    def __init__(self) -> None:
        super().__init__("ResultChannel 只能投递一次结果")
