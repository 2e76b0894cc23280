from __future__ import annotations

import pytest

from forum_api.core import config as core_config
from forum_api.repositories import sql_repository


def _delete(client, url, data):
    return client.request("DELETE", url, data=data)


def test_create_subpage_echoes_title_and_id(client):
    resp = client.post("/v1/pages/Page", data={"title": "Toyota"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["status_code"] == 200
    assert body["payload"]["title"] == "Toyota"
    assert isinstance(body["payload"]["page_id"], int)


def test_unknown_subpage_title_is_404(client):
    client.post("/v1/pages/Page", data={"title": "Toyota"})

    resp = client.get("/v1/pages/Page/Honda")

    assert resp.status_code == 404
    body = resp.json()
    assert body["status_code"] == 404
    assert "Honda" in body["error"]["message"]


def test_subpage_tree_matches_title_case_insensitively(client, hierarchy):
    resp = client.get("/v1/pages/Page/tOyOtA")

    assert resp.status_code == 200
    payload = resp.json()["payload"]
    assert payload["subpage"]["title"] == "Toyota"
    assert payload["subpage"]["visiter_count"] == 0
    assert [c["subject"] for c in payload["category"]] == ["Sports Cars"]
    assert [[s["subject"] for s in group] for group in payload["sub_category"]] == [["Supra"]]


def test_update_and_delete_subpage(client, hierarchy):
    page_id = hierarchy["page"].page_id

    resp = client.put("/v1/pages/Page", data={"page_id": str(page_id), "title": "Lexus", "description": "Luxury"})
    assert resp.status_code == 200
    assert resp.json()["payload"] == {"page_id": page_id}
    assert client.get("/v1/pages/Page/lexus").json()["payload"]["subpage"]["description"] == "Luxury"

    assert client.put("/v1/pages/Page", data={"page_id": "9999", "title": "Nope"}).status_code == 404

    assert client.delete("/v1/pages/Page/LEXUS").status_code == 200
    assert client.delete("/v1/pages/Page/Lexus").status_code == 404
    assert client.get("/v1/pages/Page/Lexus").status_code == 404


def test_category_create_and_list(client, hierarchy):
    page_id = hierarchy["page"].page_id

    resp = client.post("/v1/pages/Category", data={"subject": "Trucks", "page_id": str(page_id)})
    assert resp.status_code == 200
    assert resp.json()["payload"]["subject"] == "Trucks"

    listed = client.get("/v1/pages/Category", params={"page_id": page_id})
    assert listed.status_code == 200
    assert [c["subject"] for c in listed.json()["payload"]] == ["Sports Cars", "Trucks"]


def test_category_for_missing_subpage_is_an_insert_failure(client):
    resp = client.post("/v1/pages/Category", data={"subject": "Trucks", "page_id": "42"})

    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Unable to insert the category"


def test_delete_category_missing_then_present(client, hierarchy):
    cat_id = hierarchy["category"].cat_id

    missing = _delete(client, "/v1/pages/Category", {"cat_id": str(cat_id + 50)})
    assert missing.status_code == 404
    assert missing.json()["error"]["message"] == f"No Category with cat_id: {cat_id + 50}"

    removed = _delete(client, "/v1/pages/Category", {"cat_id": str(cat_id)})
    assert removed.status_code == 200
    assert removed.json()["payload"] == {"cat_id": cat_id}

    assert cat_id not in [c.cat_id for c in hierarchy["repo"].list_categories(hierarchy["page"].page_id)]
    listed = client.get("/v1/pages/Category", params={"page_id": hierarchy["page"].page_id})
    assert listed.json()["payload"] == []


def test_update_category_subject(client, hierarchy):
    cat_id = hierarchy["category"].cat_id

    resp = client.put("/v1/pages/Category", data={"cat_id": str(cat_id), "subject": "Coupes"})
    assert resp.status_code == 200
    assert [c.subject for c in hierarchy["repo"].list_categories(hierarchy["page"].page_id)] == ["Coupes"]


def test_subcategory_view_with_parent_and_threads(client, hierarchy):
    repo = hierarchy["repo"]
    sub_cat_id = hierarchy["subcategory"].sub_cat_id
    for n in range(3):
        repo.create_thread_with_post(f"Topic {n}", sub_cat_id, "body")

    resp = client.get(f"/v1/pages/subCategory/{sub_cat_id}")

    assert resp.status_code == 200
    payload = resp.json()["payload"]
    assert payload["subCategory"]["subject"] == "Supra"
    assert payload["Category"]["cat_id"] == hierarchy["category"].cat_id
    assert [t["subject"] for t in payload["Threads"]] == ["Topic 0", "Topic 1", "Topic 2"]


def test_subcategory_page_number_limits_threads(client, hierarchy, monkeypatch):
    repo = hierarchy["repo"]
    sub_cat_id = hierarchy["subcategory"].sub_cat_id
    for n in range(5):
        repo.create_thread_with_post(f"Topic {n}", sub_cat_id, "body")
    monkeypatch.setenv("PAGE_SIZE", "2")
    core_config.get_settings.cache_clear()

    resp = client.get(f"/v1/pages/subCategory/{sub_cat_id}/3")

    assert resp.status_code == 200
    assert [t["subject"] for t in resp.json()["payload"]["Threads"]] == ["Topic 4"]
    assert client.get(f"/v1/pages/subCategory/{sub_cat_id}/0").status_code == 400


def test_subcategory_lifecycle(client, hierarchy):
    cat_id = hierarchy["category"].cat_id

    created = client.post("/v1/pages/subCategory", data={"subject": "GT86", "main_cat_id": str(cat_id)})
    assert created.status_code == 200
    sub_cat_id = created.json()["payload"]["sub_cat_id"]

    assert client.put("/v1/pages/subCategory", data={"sub_cat_id": str(sub_cat_id), "subject": "GR86"}).status_code == 200
    assert client.get(f"/v1/pages/subCategory/{sub_cat_id}").json()["payload"]["subCategory"]["subject"] == "GR86"

    assert _delete(client, "/v1/pages/subCategory", {"sub_cat_id": str(sub_cat_id)}).status_code == 200
    assert client.get(f"/v1/pages/subCategory/{sub_cat_id}").status_code == 404
    assert _delete(client, "/v1/pages/subCategory", {"sub_cat_id": str(sub_cat_id)}).status_code == 404


def test_missing_fields_are_itemized(client):
    resp = client.post("/v1/pages/Category", data={})

    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["message"] == "Invalid request parameters"
    assert [e["msg"] for e in error["additional_information"]["errors"]] == [
        "Missing Subject Parameter",
        "Missing Page Id Parameter",
    ]


WRITE_REQUESTS = [
    ("POST", "/v1/pages/Page", {"title": "Toyota!"}),
    ("POST", "/v1/pages/Page", {"title": "Toyota", "description": "<b>bold</b>"}),
    ("PUT", "/v1/pages/Page", {"page_id": "1", "title": "Lexus;"}),
    ("POST", "/v1/pages/Category", {"subject": "Sports-Cars", "page_id": "1"}),
    ("PUT", "/v1/pages/Category", {"cat_id": "1", "subject": "a'b"}),
    ("POST", "/v1/pages/subCategory", {"subject": "GT86?", "main_cat_id": "1"}),
    ("PUT", "/v1/pages/subCategory", {"sub_cat_id": "1", "subject": "<script>"}),
    ("POST", "/v1/pages/thread", {"subject": "Mods!", "sub_cat_id": "1", "content": "body"}),
    ("POST", "/v1/pages/thread", {"subject": "Mods", "sub_cat_id": "1", "content": "DROP TABLE post;"}),
    ("PUT", "/v1/pages/thread", {"thread_id": "1", "subject": "100%"}),
    ("POST", "/v1/pages/post", {"content": "hi there!", "thread_id": "1"}),
    ("PUT", "/v1/pages/post", {"post_id": "1", "thread_id": "1", "content": "x=1"}),
    ("POST", "/v1/user/", {"name": "Bob!", "email": "bob@example.com", "password": "longenough", "confirmation": "longenough"}),
]


@pytest.mark.parametrize("method,url,data", WRITE_REQUESTS)
def test_disallowed_characters_rejected_before_the_store(client, monkeypatch, method, url, data):
    def _no_store():
        raise AssertionError("validation must run before any query")

    monkeypatch.setattr(sql_repository, "get_session", _no_store)

    resp = client.request(method, url, data=data)

    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Invalid request parameters"
