"""apps/gateway 测试配置 -- 注入内存 StoreGroup 的 FastAPI app + httpx AsyncClient"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tania.core.models import AreaSummary, CropSummary, MaterialSummary
from tania.core.query import AssetRegistry
from tania.core.store import StoreGroup, create_memory_store_group


@pytest.fixture
def asset_ids() -> dict[str, str]:
    return {
        "area": "01JAREA0000000000000000001",
        "crop": "01JCROP0000000000000000001",
        "material": "01JMATL0000000000000000001",
    }


@pytest.fixture
def store_group(asset_ids: dict[str, str]) -> StoreGroup:
    """预置资产的内存 StoreGroup"""
    registry = AssetRegistry()
    registry.add_area(AreaSummary(uid=asset_ids["area"], name="Greenhouse A"))
    registry.add_crop(CropSummary(uid=asset_ids["crop"], batch_id="tom-2026-01"))
    registry.add_material(
        MaterialSummary(uid=asset_ids["material"], name="Tomato seed", type_code="SEED")
    )
    return create_memory_store_group(registry)


@pytest_asyncio.fixture
async def app(store_group: StoreGroup, monkeypatch, tmp_path):
    """创建测试用 FastAPI app 实例"""
    monkeypatch.setenv("TANIA_DB_PATH", str(tmp_path / "sqlite" / "test.db"))
    monkeypatch.setenv("LOGFIRE_SEND_TO_LOGFIRE", "false")

    from tania.gateway.main import create_app

    application = create_app()
    # ASGITransport 不触发 lifespan，直接注入
    application.state.store_group = store_group
    return application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """提供 httpx AsyncClient 用于测试"""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def crop_task_body(asset_ids: dict[str, str]) -> dict:
    """合法的 CROP 任务创建请求体"""
    return {
        "title": "Water tomatoes",
        "description": "Morning round",
        "due_date": "2099-01-01T08:00:00Z",
        "priority": "URGENT",
        "domain": "CROP",
        "inventory_id": asset_ids["material"],
        "category": "WATERING",
        "asset_id": asset_ids["crop"],
    }
