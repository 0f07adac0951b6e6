"""配置常量模块 -- 可通过环境变量覆盖

包含数据目录、数据库路径与存储后端选择。
"""

import os
from pathlib import Path

import structlog

log = structlog.get_logger()

STORAGE_BACKENDS: tuple[str, ...] = ("sqlite", "memory")


def _get_base_dir() -> Path:
    """获取项目 data 基础目录"""
    return Path(os.environ.get("TANIA_DATA_DIR", "data"))


def get_db_path() -> str:
    """获取 SQLite 数据库路径"""
    return os.environ.get(
        "TANIA_DB_PATH",
        str(_get_base_dir() / "sqlite" / "tania.db"),
    )


def get_storage_backend() -> str:
    """获取存储后端：sqlite（默认）或 memory"""
    backend = os.environ.get("TANIA_STORAGE_BACKEND", "sqlite").lower()
    if backend not in STORAGE_BACKENDS:
        log.warning(
            "invalid_storage_backend_config",
            env_var="TANIA_STORAGE_BACKEND",
            value=backend,
            fallback="sqlite",
        )
        # 使用默认值，不阻塞启动
        return "sqlite"
    return backend
