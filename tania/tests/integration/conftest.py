"""集成测试共享 fixture -- SQLite 后端的完整 app"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tania.core.models import AreaSummary, CropSummary, MaterialSummary
from tania.core.store import SqliteAssetStore, create_store_group


@pytest.fixture
def seeded_assets() -> dict[str, str]:
    return {
        "area": "01JAREA0000000000000000001",
        "crop": "01JCROP0000000000000000001",
        "material": "01JMATL0000000000000000001",
    }


@pytest_asyncio.fixture
async def integration_app(tmp_path: Path, seeded_assets, monkeypatch):
    """集成测试用 FastAPI app，资产表预先写入"""
    db_path = str(tmp_path / "test.db")
    monkeypatch.setenv("TANIA_DB_PATH", db_path)
    monkeypatch.setenv("LOGFIRE_SEND_TO_LOGFIRE", "false")

    from tania.gateway.main import create_app

    app = create_app()

    store_group = await create_store_group(db_path)
    assets = SqliteAssetStore(store_group.conn)
    await assets.put_area(AreaSummary(uid=seeded_assets["area"], name="Greenhouse A"))
    await assets.put_crop(CropSummary(uid=seeded_assets["crop"], batch_id="tom-2026-01"))
    await assets.put_material(
        MaterialSummary(uid=seeded_assets["material"], name="Tomato seed", type_code="SEED")
    )
    await store_group.conn.commit()
    app.state.store_group = store_group

    yield app

    await store_group.close()


@pytest_asyncio.fixture
async def client(integration_app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=integration_app),
        base_url="http://test",
    ) as ac:
        yield ac
