"""跨聚合查询结果 -- 资产摘要

查询服务只返回任务校验所需的最小字段。
"""

from pydantic import BaseModel, Field


class AreaSummary(BaseModel):
    """区域摘要"""

    uid: str = Field(description="区域 ID")
    name: str = Field(default="", description="区域名称")


class CropSummary(BaseModel):
    """作物批次摘要"""

    uid: str = Field(description="作物 ID")
    batch_id: str = Field(default="", description="批次编号")


class MaterialSummary(BaseModel):
    """库存物料摘要"""

    uid: str = Field(description="物料 ID")
    name: str = Field(default="", description="物料名称")
    type_code: str = Field(default="", description="物料类型编码")
