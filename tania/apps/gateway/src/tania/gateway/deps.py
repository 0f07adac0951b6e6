"""依赖注入 -- 路由通过 Depends 获取 TaskService

StoreGroup 挂在 app.state 上，由 lifespan 创建（测试中直接注入）。
"""

from fastapi import Depends, Request
from tania.core.store import StoreGroup

from .services.task_service import TaskService


def get_store_group(request: Request) -> StoreGroup:
    return request.app.state.store_group


def get_task_service(store_group: StoreGroup = Depends(get_store_group)) -> TaskService:
    """每个请求构造一个绑定当前 StoreGroup 的 TaskService"""
    return TaskService(store_group)
