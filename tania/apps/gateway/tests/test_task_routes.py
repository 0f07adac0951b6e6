"""任务路由测试 -- POST/GET /api/tasks

测试内容：
1. 创建成功返回 201 与完整任务
2. 校验失败返回 400 与错误码
3. 列表按 created_date 倒序，支持 status 筛选
4. 详情查询与 404
"""

import pytest
from tania.core.result import ResultChannel


class LockedRepository:
    """所有操作都在错误槽返回数据库错误"""

    def save(self, task):
        return ResultChannel.failed(RuntimeError("database is locked"))

    def find_by_id(self, uid):
        return ResultChannel.failed(RuntimeError("database is locked"))

    def find_all(self):
        return ResultChannel.failed(RuntimeError("database is locked"))


class TestCreateTaskRoute:
    async def test_create_crop_task(self, client, crop_task_body, asset_ids):
        resp = await client.post("/api/tasks", json=crop_task_body)
        assert resp.status_code == 201

        task = resp.json()["task"]
        assert len(task["uid"]) == 26
        assert task["title"] == "Water tomatoes"
        assert task["status"] == "CREATED"
        assert task["priority"] == "URGENT"
        assert task["category"] == "WATERING"
        assert task["asset_id"] == asset_ids["crop"]
        assert task["domain"] == {"code": "CROP", "material_id": asset_ids["material"]}

    async def test_create_persists_task(self, client, crop_task_body, store_group):
        resp = await client.post("/api/tasks", json=crop_task_body)
        uid = resp.json()["task"]["uid"]

        stored = (await store_group.task_repo.find_by_id(uid)).unwrap()
        assert stored is not None
        assert stored.title == "Water tomatoes"

    @pytest.mark.parametrize(
        "overrides,code",
        [
            ({"title": ""}, "TITLE_EMPTY"),
            ({"due_date": "2017-01-23T17:37:39Z"}, "DUE_DATE_INVALID"),
            ({"priority": ""}, "PRIORITY_EMPTY"),
            ({"priority": "urgent"}, "INVALID_PRIORITY"),
            ({"category": ""}, "CATEGORY_EMPTY"),
            ({"category": "VEGETABLE"}, "INVALID_CATEGORY"),
            ({"asset_id": "01JUNKNOWN0000000000000001"}, "INVALID_ASSET_ID"),
            ({"domain": ""}, "DOMAIN_EMPTY"),
            ({"domain": "LIVESTOCK"}, "INVALID_DOMAIN"),
            ({"inventory_id": ""}, "MATERIAL_ID_EMPTY"),
            ({"inventory_id": "01JUNKNOWN0000000000000001"}, "INVALID_ASSET_ID"),
        ],
    )
    async def test_validation_errors(self, client, crop_task_body, overrides, code):
        resp = await client.post("/api/tasks", json={**crop_task_body, **overrides})
        assert resp.status_code == 400
        error = resp.json()["error"]
        assert error["code"] == code
        assert error["message"]

    async def test_rejected_task_not_persisted(self, client, crop_task_body):
        await client.post("/api/tasks", json={**crop_task_body, "title": ""})
        resp = await client.get("/api/tasks")
        assert resp.json()["tasks"] == []

    async def test_empty_asset_id_treated_as_absent(self, client, crop_task_body):
        resp = await client.post("/api/tasks", json={**crop_task_body, "asset_id": ""})
        assert resp.status_code == 201
        assert resp.json()["task"]["asset_id"] is None

    async def test_create_general_task_without_due_date(self, client):
        resp = await client.post(
            "/api/tasks",
            json={
                "title": "Fix the fence",
                "priority": "NORMAL",
                "domain": "GENERAL",
                "category": "GENERAL",
            },
        )
        assert resp.status_code == 201
        task = resp.json()["task"]
        assert task["due_date"] is None
        assert task["domain"] == {"code": "GENERAL"}

    async def test_malformed_due_date_rejected_by_schema(self, client, crop_task_body):
        resp = await client.post(
            "/api/tasks", json={**crop_task_body, "due_date": "next tuesday"}
        )
        assert resp.status_code == 422


class TestQueryTaskRoutes:
    async def test_list_newest_first(self, client, crop_task_body):
        uids = []
        for title in ("first", "second", "third"):
            resp = await client.post("/api/tasks", json={**crop_task_body, "title": title})
            uids.append(resp.json()["task"]["uid"])

        resp = await client.get("/api/tasks")
        assert resp.status_code == 200
        assert [t["uid"] for t in resp.json()["tasks"]] == list(reversed(uids))

    async def test_list_filter_by_status(self, client, crop_task_body):
        first = (await client.post("/api/tasks", json=crop_task_body)).json()["task"]
        await client.post("/api/tasks", json=crop_task_body)
        await client.put(f"/api/tasks/{first['uid']}/cancel")

        resp = await client.get("/api/tasks", params={"status": "CANCELLED"})
        tasks = resp.json()["tasks"]
        assert [t["uid"] for t in tasks] == [first["uid"]]

        resp = await client.get("/api/tasks", params={"status": "CREATED"})
        assert len(resp.json()["tasks"]) == 1

    async def test_get_detail(self, client, crop_task_body):
        created = (await client.post("/api/tasks", json=crop_task_body)).json()["task"]

        resp = await client.get(f"/api/tasks/{created['uid']}")
        assert resp.status_code == 200
        assert resp.json()["task"] == created

    async def test_get_missing_returns_404(self, client):
        resp = await client.get("/api/tasks/01JMISSING0000000000000001")
        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "TASK_NOT_FOUND"


class TestInternalErrors:
    async def test_detail_storage_error_returns_500(self, client, store_group):
        store_group.task_repo = LockedRepository()

        resp = await client.get("/api/tasks/01JTASK0000000000000000001")
        assert resp.status_code == 500
        assert resp.json() == {
            "error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}
        }
        assert "X-Request-ID" in resp.headers

    async def test_list_storage_error_returns_500(self, client, store_group):
        store_group.task_repo = LockedRepository()
        resp = await client.get("/api/tasks")
        assert resp.status_code == 500

    async def test_create_storage_error_returns_500(self, client, store_group, crop_task_body):
        store_group.task_repo = LockedRepository()
        resp = await client.post("/api/tasks", json=crop_task_body)
        assert resp.status_code == 500
        assert resp.json()["error"]["code"] == "INTERNAL_ERROR"
