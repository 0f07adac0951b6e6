"""错误响应构造 -- 统一 {"error": {"code", "message"}} 格式

- TaskError -> 400，code 与 message 来自异常
- 任务不存在 -> 404 TASK_NOT_FOUND
- 其他异常 -> 500 INTERNAL_ERROR，细节只写日志
"""

import structlog
from starlette.responses import JSONResponse
from tania.core.exceptions import TaskError

log = structlog.get_logger()


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message}},
    )


def task_error_response(error: TaskError) -> JSONResponse:
    return error_response(400, error.code.value, error.message)


def task_not_found_response(task_id: str) -> JSONResponse:
    return error_response(
        404, "TASK_NOT_FOUND", f"Task with id {task_id} does not exist"
    )


def internal_error_response(error: Exception) -> JSONResponse:
    log.error("request_failed", error_type=type(error).__name__, error=str(error))
    return error_response(500, "INTERNAL_ERROR", "Internal server error")
