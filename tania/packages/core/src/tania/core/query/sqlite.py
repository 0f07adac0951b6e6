"""SQLite 查询服务 -- 从资产表读取摘要的 TaskQueryService 实现"""

import aiosqlite

from ..models.query import AreaSummary, CropSummary, MaterialSummary
from ..result import ResultChannel


class SqliteTaskQueryService:
    """TaskQueryService 的 SQLite 实现

    与任务仓储共享同一个数据库连接，只读。
    """

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    def find_area_by_id(self, uid: str) -> ResultChannel:
        return ResultChannel.from_coroutine(self._find_area(uid))

    def find_crop_by_id(self, uid: str) -> ResultChannel:
        return ResultChannel.from_coroutine(self._find_crop(uid))

    def find_material_by_id(self, uid: str) -> ResultChannel:
        return ResultChannel.from_coroutine(self._find_material(uid))

    async def _find_area(self, uid: str) -> AreaSummary | None:
        row = await self._fetch_one("SELECT uid, name FROM areas WHERE uid = ?", uid)
        if row is None:
            return None
        return AreaSummary(uid=row[0], name=row[1])

    async def _find_crop(self, uid: str) -> CropSummary | None:
        row = await self._fetch_one(
            "SELECT uid, batch_id FROM crops WHERE uid = ?", uid
        )
        if row is None:
            return None
        return CropSummary(uid=row[0], batch_id=row[1])

    async def _find_material(self, uid: str) -> MaterialSummary | None:
        row = await self._fetch_one(
            "SELECT uid, name, type_code FROM materials WHERE uid = ?", uid
        )
        if row is None:
            return None
        return MaterialSummary(uid=row[0], name=row[1], type_code=row[2])

    async def _fetch_one(self, sql: str, uid: str):
        cursor = await self._conn.execute(sql, (uid,))
        return await cursor.fetchone()
