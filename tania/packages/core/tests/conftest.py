"""packages/core 测试配置 -- 核心层 fixture"""

import pytest
from tania.core.models import AreaSummary, CropSummary, MaterialSummary
from tania.core.query import AssetRegistry, InMemoryTaskQueryService


@pytest.fixture
def area_id() -> str:
    return "01JAREA0000000000000000001"


@pytest.fixture
def crop_id() -> str:
    return "01JCROP0000000000000000001"


@pytest.fixture
def material_id() -> str:
    return "01JMATL0000000000000000001"


@pytest.fixture
def asset_registry(area_id: str, crop_id: str, material_id: str) -> AssetRegistry:
    """预置一个区域、一个作物、一个物料的资产登记表"""
    registry = AssetRegistry()
    registry.add_area(AreaSummary(uid=area_id, name="Greenhouse A"))
    registry.add_crop(CropSummary(uid=crop_id, batch_id="tom-2026-01"))
    registry.add_material(
        MaterialSummary(uid=material_id, name="Tomato seed", type_code="SEED")
    )
    return registry


@pytest.fixture
def query_service(asset_registry: AssetRegistry) -> InMemoryTaskQueryService:
    return InMemoryTaskQueryService(asset_registry)
