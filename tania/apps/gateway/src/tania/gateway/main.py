"""FastAPI 应用主文件

app 创建 + lifespan 管理：Store 初始化/关闭 + 路由注册。
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from tania.core.config import get_db_path, get_storage_backend
from tania.core.store import create_store_group

from .middleware.logging_config import setup_logfire, setup_logging
from .middleware.logging_mw import LoggingMiddleware
from .middleware.trace_mw import TraceMiddleware
from .routes import health, status, tasks

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """应用生命周期管理：启动时初始化 Store，关闭时清理连接"""
    # 测试可预先注入 store_group，跳过初始化；注入的实例由调用方负责关闭
    owns_store_group = getattr(app.state, "store_group", None) is None
    if owns_store_group:
        backend = get_storage_backend()
        app.state.store_group = await create_store_group(get_db_path(), backend)
        log.info("store_group_initialized", backend=backend)

    yield

    if owns_store_group:
        await app.state.store_group.close()
        app.state.store_group = None


def create_app() -> FastAPI:
    """创建 FastAPI 应用实例"""
    app = FastAPI(
        title="Tania Tasks Gateway",
        version="0.1.0",
        description="农场任务管理 API",
        lifespan=lifespan,
    )

    # 注册中间件（顺序：先 Trace 后 Logging）
    app.add_middleware(TraceMiddleware)
    app.add_middleware(LoggingMiddleware)

    # 初始化日志
    setup_logging()
    setup_logfire()

    # 注册路由
    app.include_router(tasks.router, tags=["tasks"])
    app.include_router(status.router, tags=["status"])
    app.include_router(health.router, tags=["health"])

    return app


# 默认 app 实例（uvicorn 入口）
app = create_app()
