"""资产表写入 -- 供资产子系统登记区域、作物、物料摘要

任务侧通过 SqliteTaskQueryService 只读这些表。
"""

import aiosqlite

from ..models.query import AreaSummary, CropSummary, MaterialSummary


class SqliteAssetStore:
    """资产摘要的 SQLite 写入实现

    注意：此类方法不自动提交事务，需由调用方管理事务。
    与 SqliteTaskRepository 共享连接时，任务 save 的 commit / rollback
    会一并提交或丢弃这里尚未提交的写入；登记资产后应先自行 commit。
    """

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    async def put_area(self, area: AreaSummary) -> None:
        await self._conn.execute(
            "INSERT OR REPLACE INTO areas (uid, name) VALUES (?, ?)",
            (area.uid, area.name),
        )

    async def put_crop(self, crop: CropSummary) -> None:
        await self._conn.execute(
            "INSERT OR REPLACE INTO crops (uid, batch_id) VALUES (?, ?)",
            (crop.uid, crop.batch_id),
        )

    async def put_material(self, material: MaterialSummary) -> None:
        await self._conn.execute(
            "INSERT OR REPLACE INTO materials (uid, name, type_code) VALUES (?, ?, ?)",
            (material.uid, material.name, material.type_code),
        )
