"""Task 领域变体 -- 任务绑定的资产领域（tagged union）

每个变体只携带本领域所需字段，以 code 作为判别字段。
CROP 变体构造时需通过查询服务确认物料存在，其余变体仅做本地构造。
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from ..exceptions import TaskDomainError, TaskErrorCode
from ..query.protocols import TaskQueryService
from .enums import TaskDomainCode


class TaskDomainArea(BaseModel):
    code: Literal["AREA"] = "AREA"


class TaskDomainCrop(BaseModel):
    code: Literal["CROP"] = "CROP"
    material_id: str = Field(description="关联的库存物料 ID")


class TaskDomainFinance(BaseModel):
    code: Literal["FINANCE"] = "FINANCE"


class TaskDomainGeneral(BaseModel):
    code: Literal["GENERAL"] = "GENERAL"


class TaskDomainInventory(BaseModel):
    code: Literal["INVENTORY"] = "INVENTORY"


class TaskDomainReservoir(BaseModel):
    code: Literal["RESERVOIR"] = "RESERVOIR"


TaskDomain = Annotated[
    TaskDomainArea
    | TaskDomainCrop
    | TaskDomainFinance
    | TaskDomainGeneral
    | TaskDomainInventory
    | TaskDomainReservoir,
    Field(discriminator="code"),
]


def create_task_domain_area() -> TaskDomainArea:
    return TaskDomainArea()


def create_task_domain_finance() -> TaskDomainFinance:
    return TaskDomainFinance()


def create_task_domain_general() -> TaskDomainGeneral:
    return TaskDomainGeneral()


def create_task_domain_inventory() -> TaskDomainInventory:
    return TaskDomainInventory()


def create_task_domain_reservoir() -> TaskDomainReservoir:
    return TaskDomainReservoir()


async def create_task_domain_crop(
    query_service: TaskQueryService,
    material_id: str | None,
) -> TaskDomainCrop:
    """构造 CROP 变体，物料必须存在

    Raises:
        TaskDomainError: material_id 为空（MATERIAL_ID_EMPTY）
            或物料不存在（INVALID_ASSET_ID）
        Exception: 查询服务返回的基础设施错误，原样抛出
    """
    if not material_id:
        raise TaskDomainError(TaskErrorCode.MATERIAL_ID_EMPTY)

    result = await query_service.find_material_by_id(material_id)
    if result.error is not None:
        raise result.error
    if result.result is None:
        raise TaskDomainError(TaskErrorCode.INVALID_ASSET_ID)

    return TaskDomainCrop(material_id=material_id)


_LOCAL_CONSTRUCTORS = {
    TaskDomainCode.AREA: create_task_domain_area,
    TaskDomainCode.FINANCE: create_task_domain_finance,
    TaskDomainCode.GENERAL: create_task_domain_general,
    TaskDomainCode.INVENTORY: create_task_domain_inventory,
    TaskDomainCode.RESERVOIR: create_task_domain_reservoir,
}


async def create_task_domain(
    code: str | None,
    query_service: TaskQueryService,
    material_id: str | None = None,
) -> TaskDomain:
    """按领域编码构造变体

    Args:
        code: 领域编码，如 "CROP"
        query_service: CROP 变体校验物料时使用
        material_id: 仅 CROP 变体使用

    Raises:
        TaskDomainError: 编码为空（DOMAIN_EMPTY）或未知（INVALID_DOMAIN），
            以及各变体自身的构造错误
    """
    if not code:
        raise TaskDomainError(TaskErrorCode.DOMAIN_EMPTY)
    try:
        domain_code = TaskDomainCode(code)
    except ValueError:
        raise TaskDomainError(TaskErrorCode.INVALID_DOMAIN) from None

    if domain_code == TaskDomainCode.CROP:
        return await create_task_domain_crop(query_service, material_id)
    return _LOCAL_CONSTRUCTORS[domain_code]()
