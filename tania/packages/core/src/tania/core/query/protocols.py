"""查询服务 Protocol 接口定义

任务领域校验通过该接口查询其他聚合（区域、作物、物料）是否存在。
每个方法返回可 await 的对象，结果为 ServiceResult：
- result 为对应摘要，未找到时为 None
- error 为基础设施错误，调用方原样传播
"""

from collections.abc import Awaitable
from typing import Protocol

from ..result import ServiceResult


class TaskQueryService(Protocol):
    """跨聚合资产查询接口"""

    def find_area_by_id(self, uid: str) -> Awaitable[ServiceResult]:
        """查询区域，成功值为 AreaSummary | None"""
        ...

    def find_crop_by_id(self, uid: str) -> Awaitable[ServiceResult]:
        """查询作物，成功值为 CropSummary | None"""
        ...

    def find_material_by_id(self, uid: str) -> Awaitable[ServiceResult]:
        """查询库存物料，成功值为 MaterialSummary | None"""
        ...
