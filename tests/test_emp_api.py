# tests/test_emp_api.py
import pytest
from httpx import ASGITransport, AsyncClient

from src.emp_crud.app import app
from src.emp_crud.utils.database import get_db


@pytest.fixture
async def client(session_factory):
    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


async def test_create_then_get(client):
    r = await client.post("/api/emps", json={
        "username": "Tom2", "name": "Tom II", "gender": 1, "job": 1,
        "entrydate": "2000-01-01", "dept_id": 1,
    })
    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "created"
    new_id = body["id"]

    r = await client.get(f"/api/emps/{new_id}")
    assert r.status_code == 200
    emp = r.json()
    assert emp["username"] == "Tom2"
    assert emp["entrydate"] == "2000-01-01"
    assert emp["create_time"] == emp["update_time"]


async def test_create_duplicate_username_is_400(client, seeded):
    r = await client.post("/api/emps", json={"username": "zhangwuji", "name": "Again", "gender": 1})
    assert r.status_code == 400
    assert r.json()["message"] == "Username already exists"


async def test_create_rejects_unknown_codes(client):
    r = await client.post("/api/emps", json={"username": "x", "name": "X", "gender": 3})
    assert r.status_code == 422
    body = r.json()
    assert body["error_type"] == "RequestValidationError"
    assert body["errors"]

    r = await client.post("/api/emps", json={"username": "x", "name": "X", "gender": 1, "job": 9})
    assert r.status_code == 422


async def test_list_with_query_filters(client, seeded):
    r = await client.get("/api/emps", params={"name": "Zhang", "gender": 1})
    assert r.status_code == 200
    assert [e["username"] for e in r.json()] == ["zhangsanfeng", "zhangwuji"]

    r = await client.get("/api/emps", params={"begin": "2012-03-01", "end": "2015-01-01"})
    assert {e["username"] for e in r.json()} == {"zhangmin", "xiaozhao", "zhangwuji"}


async def test_patch_updates_only_given_fields(client, seeded):
    emp_id = seeded["zhangmin"]
    r = await client.patch(f"/api/emps/{emp_id}", json={"name": "Zhao Min"})
    assert r.status_code == 200
    assert r.json() == {"message": "updated", "id": emp_id}

    emp = (await client.get(f"/api/emps/{emp_id}")).json()
    assert emp["name"] == "Zhao Min"
    assert emp["username"] == "zhangmin"
    assert emp["gender"] == 2


async def test_patch_missing_row_is_404(client, seeded):
    r = await client.patch("/api/emps/9999", json={"name": "Ghost"})
    assert r.status_code == 404
    assert r.json()["status_code"] == 404


async def test_delete_reports_rows(client, seeded):
    emp_id = seeded["weiyixiao"]
    r = await client.delete(f"/api/emps/{emp_id}")
    assert r.json() == {"message": "deleted", "id": emp_id, "rows": 1}

    r = await client.delete(f"/api/emps/{emp_id}")
    assert r.status_code == 200
    assert r.json()["rows"] == 0

    r = await client.get(f"/api/emps/{emp_id}")
    assert r.status_code == 404
