"""SQLite 数据库初始化

PRAGMA 配置 + tasks 表与资产表 DDL + 索引创建。
使用 aiosqlite 异步操作。
"""

import aiosqlite

# tasks 表 DDL
_TASKS_DDL = """
CREATE TABLE IF NOT EXISTS tasks (
    uid            TEXT PRIMARY KEY,
    title          TEXT NOT NULL,
    description    TEXT NOT NULL DEFAULT '',
    created_date   TEXT NOT NULL,
    due_date       TEXT,
    priority       TEXT NOT NULL,
    category       TEXT NOT NULL,
    domain_code    TEXT NOT NULL,
    domain_details TEXT NOT NULL DEFAULT '{}',
    asset_id       TEXT,
    status         TEXT NOT NULL DEFAULT 'CREATED'
);
"""

_TASKS_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_tasks_status ON tasks(status);",
    "CREATE INDEX IF NOT EXISTS idx_tasks_asset_id ON tasks(asset_id);",
    "CREATE INDEX IF NOT EXISTS idx_tasks_created_date ON tasks(created_date DESC);",
]

# 资产表由资产子系统写入，任务侧只读
_ASSETS_DDL = [
    """
    CREATE TABLE IF NOT EXISTS areas (
        uid   TEXT PRIMARY KEY,
        name  TEXT NOT NULL DEFAULT ''
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS crops (
        uid       TEXT PRIMARY KEY,
        batch_id  TEXT NOT NULL DEFAULT ''
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS materials (
        uid        TEXT PRIMARY KEY,
        name       TEXT NOT NULL DEFAULT '',
        type_code  TEXT NOT NULL DEFAULT ''
    );
    """,
]


async def init_db(conn: aiosqlite.Connection) -> None:
    """初始化数据库：设置 PRAGMA + 创建表 + 创建索引

    Args:
        conn: aiosqlite 数据库连接
    """
    await conn.execute("PRAGMA journal_mode = WAL;")
    await conn.execute("PRAGMA busy_timeout = 5000;")

    await conn.execute(_TASKS_DDL)
    for ddl in _ASSETS_DDL:
        await conn.execute(ddl)

    for idx_sql in _TASKS_INDEXES:
        await conn.execute(idx_sql)

    await conn.commit()


async def verify_wal_mode(conn: aiosqlite.Connection) -> bool:
    """验证 WAL 模式是否生效

    Returns:
        True 如果 WAL 模式已启用
    """
    cursor = await conn.execute("PRAGMA journal_mode;")
    row = await cursor.fetchone()
    return row is not None and row[0].lower() == "wal"
