"""任务路由

POST /api/tasks: 创建任务。
GET /api/tasks: 任务列表查询，支持 status 筛选。
GET /api/tasks/{task_id}: 任务详情查询。
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field
from starlette.responses import JSONResponse
from tania.core.exceptions import TaskError

from ..deps import get_task_service
from ..errors import internal_error_response, task_error_response, task_not_found_response
from ..services.task_service import TaskService

router = APIRouter()


class CreateTaskRequest(BaseModel):
    """任务创建请求体

    字段缺省为空字符串，交由领域校验返回具体错误码。
    """

    title: str = Field(default="", description="任务标题")
    description: str = Field(default="", description="任务描述")
    due_date: datetime | None = Field(default=None, description="截止时间（RFC3339）")
    priority: str = Field(default="", description="NORMAL / URGENT")
    domain: str = Field(default="", description="领域编码，如 CROP")
    inventory_id: str | None = Field(default=None, description="CROP 领域的物料 ID")
    category: str = Field(default="", description="任务分类，如 SANITATION")
    asset_id: str | None = Field(default=None, description="关联资产 ID")


@router.post("/api/tasks")
async def create_task(
    body: CreateTaskRequest,
    service: TaskService = Depends(get_task_service),
):
    """创建任务

    - 成功返回 201 + 任务详情
    - 校验失败返回 400 + 错误码
    """
    try:
        task = await service.create_task(
            title=body.title,
            description=body.description,
            due_date=body.due_date,
            priority=body.priority,
            domain_code=body.domain,
            category=body.category,
            # 空字符串等同于未提供
            asset_id=body.asset_id or None,
            material_id=body.inventory_id,
        )
    except TaskError as e:
        return task_error_response(e)
    except Exception as e:
        return internal_error_response(e)

    return JSONResponse(
        status_code=201,
        content={"task": task.model_dump(mode="json")},
    )


@router.get("/api/tasks")
async def list_tasks(
    status: str | None = Query(default=None, description="按状态筛选"),
    service: TaskService = Depends(get_task_service),
):
    """查询任务列表，支持按状态筛选，按 created_date 倒序"""
    try:
        tasks = await service.list_tasks(status)
    except Exception as e:
        return internal_error_response(e)

    return {"tasks": [t.model_dump(mode="json") for t in tasks]}


@router.get("/api/tasks/{task_id}")
async def get_task_detail(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """查询任务详情"""
    try:
        task = await service.get_task(task_id)
    except Exception as e:
        return internal_error_response(e)

    if task is None:
        return task_not_found_response(task_id)

    return {"task": task.model_dump(mode="json")}
