"""任务状态路由

PUT /api/tasks/{task_id}/cancel: 取消任务。
PUT /api/tasks/{task_id}/complete: 完成任务。
PUT /api/tasks/{task_id}/due: 标记为到期（无内部定时器，由外部触发）。

终态任务再次流转不报错，状态保持不变，返回 200。
"""

from fastapi import APIRouter, Depends
from tania.core.models import TaskStatus

from ..deps import get_task_service
from ..errors import internal_error_response, task_not_found_response
from ..services.task_service import TaskService

router = APIRouter()


async def _change_status(service: TaskService, task_id: str, status: TaskStatus):
    try:
        task = await service.change_status(task_id, status)
    except Exception as e:
        return internal_error_response(e)

    if task is None:
        return task_not_found_response(task_id)

    return {"task": task.model_dump(mode="json")}


@router.put("/api/tasks/{task_id}/cancel")
async def cancel_task(task_id: str, service: TaskService = Depends(get_task_service)):
    return await _change_status(service, task_id, TaskStatus.CANCELLED)


@router.put("/api/tasks/{task_id}/complete")
async def complete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    return await _change_status(service, task_id, TaskStatus.COMPLETED)


@router.put("/api/tasks/{task_id}/due")
async def set_task_as_due(task_id: str, service: TaskService = Depends(get_task_service)):
    return await _change_status(service, task_id, TaskStatus.DUE)
