import uuid

import pytest


pytestmark = pytest.mark.asyncio


@pytest.mark.parametrize("resource, label", [("folders", "Folder"), ("tags", "Tag")])
async def test_named_item_crud_flow(client, auth_headers, resource, label):
    base = f"/api/{resource}"

    list_resp = await client.get(base, headers=auth_headers)
    assert list_resp.status_code == 200
    assert list_resp.json() == []

    create_resp = await client.post(base, headers=auth_headers, json={"name": "Work"})
    assert create_resp.status_code == 201
    item = create_resp.json()
    assert item["name"] == "Work"
    assert create_resp.headers["location"] == f"{base}/{item['id']}"

    detail_resp = await client.get(f"{base}/{item['id']}", headers=auth_headers)
    assert detail_resp.status_code == 200
    assert detail_resp.json()["name"] == "Work"

    dup_resp = await client.post(base, headers=auth_headers, json={"name": "Work"})
    assert dup_resp.status_code == 400
    assert dup_resp.json()["message"] == f"{label} name already exists"

    rename_resp = await client.put(f"{base}/{item['id']}", headers=auth_headers, json={"name": "Archive"})
    assert rename_resp.status_code == 200
    assert rename_resp.json()["name"] == "Archive"

    delete_resp = await client.delete(f"{base}/{item['id']}", headers=auth_headers)
    assert delete_resp.status_code == 204

    missing_resp = await client.get(f"{base}/{item['id']}", headers=auth_headers)
    assert missing_resp.status_code == 404


@pytest.mark.parametrize("resource", ["folders", "tags"])
async def test_named_item_validation(client, auth_headers, resource):
    base = f"/api/{resource}"

    missing = await client.post(base, headers=auth_headers, json={})
    assert missing.status_code == 400
    assert missing.json()["message"] == "Missing 'name' in request body"

    bad_id = await client.get(f"{base}/not-an-id", headers=auth_headers)
    assert bad_id.status_code == 400
    assert bad_id.json()["message"] == "The 'id' is not valid"

    unknown = await client.put(f"{base}/{uuid.uuid4()}", headers=auth_headers, json={"name": "x"})
    assert unknown.status_code == 404


async def test_rename_to_existing_name(client, auth_headers):
    await client.post("/api/folders", headers=auth_headers, json={"name": "Drafts"})
    work = (await client.post("/api/folders", headers=auth_headers, json={"name": "Work"})).json()
    resp = await client.put(f"/api/folders/{work['id']}", headers=auth_headers, json={"name": "Drafts"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Folder name already exists"


async def test_folders_sorted_by_name(client, auth_headers):
    for name in ("Work", "Archive", "Personal"):
        await client.post("/api/folders", headers=auth_headers, json={"name": name})
    resp = await client.get("/api/folders", headers=auth_headers)
    assert [f["name"] for f in resp.json()] == ["Archive", "Personal", "Work"]


async def test_names_are_unique_per_user_only(client, create_user, auth_header_factory):
    user_a, pw_a = await create_user()
    user_b, pw_b = await create_user()
    headers_a = await auth_header_factory(user_a.username, pw_a)
    headers_b = await auth_header_factory(user_b.username, pw_b)

    resp_a = await client.post("/api/tags", headers=headers_a, json={"name": "breed"})
    resp_b = await client.post("/api/tags", headers=headers_b, json={"name": "breed"})
    assert resp_a.status_code == 201
    assert resp_b.status_code == 201

    # Each user only sees their own
    other = await client.get(f"/api/tags/{resp_a.json()['id']}", headers=headers_b)
    assert other.status_code == 404
    listed = await client.get("/api/tags", headers=headers_b)
    assert [t["id"] for t in listed.json()] == [resp_b.json()["id"]]


async def test_response_shape(client, auth_headers):
    folder = await client.post("/api/folders", headers=auth_headers, json={"name": "Work"})
    assert set(folder.json()) == {"id", "name", "createdAt", "updatedAt"}
    listed = await client.get("/api/tags", headers=auth_headers)
    assert listed.json() == []


async def test_overlong_name_rejected(client, auth_headers):
    resp = await client.post("/api/tags", headers=auth_headers, json={"name": "t" * 257})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Malformed request body"}
