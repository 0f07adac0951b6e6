"""健康检查路由

GET /health: Liveness 检查，永远返回 200。
GET /ready: Readiness 检查，包含存储后端连通性与磁盘空间。
"""

import shutil

import structlog
from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

log = structlog.get_logger()

router = APIRouter()


@router.get("/health")
async def health():
    """Liveness 检查 -- 永远返回 200"""
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request):
    """Readiness 检查 -- 验证存储可用性

    检查项：
    1. storage: SQLite 连通性（memory 后端直接视为可用）
    2. disk_space_mb: 磁盘剩余空间
    """
    checks = {}
    all_ok = True

    # 1. 存储连通性检查
    try:
        store_group = request.app.state.store_group
        if store_group.conn is not None:
            cursor = await store_group.conn.execute("SELECT 1")
            await cursor.fetchone()
        checks["storage"] = "ok"
        checks["backend"] = store_group.backend
    except Exception as e:
        log.warning("ready_check_storage_error", error=str(e))
        checks["storage"] = f"error: {str(e)}"
        all_ok = False

    # 2. 磁盘空间检查
    try:
        disk_usage = shutil.disk_usage("/")
        checks["disk_space_mb"] = disk_usage.free // (1024 * 1024)
    except Exception:
        checks["disk_space_mb"] = 0
        all_ok = False

    status_code = 200 if all_ok else 503
    status_text = "ready" if all_ok else "not_ready"

    return JSONResponse(
        status_code=status_code,
        content={"status": status_text, "checks": checks},
    )
