import pytest
from sqlalchemy import func
from sqlmodel import Session, select

from lms_backend.errors import BadRequest
from lms_backend.models import Category
from lms_backend.services import create_category, list_categories


def _category_count(engine) -> int:
    with Session(engine) as session:
        return session.exec(select(func.count(Category.id))).one()


def test_create_category_applies_defaults(client):
    r = client.post("/api/categories", json={"name": "Math"})
    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "Math"
    assert body["icon"] == "Layout"
    assert body["color"] == "#000000"
    assert isinstance(body["id"], int)


def test_create_category_keeps_given_values(client):
    r = client.post("/api/categories", json={"name": "Design", "icon": "Palette", "color": "#ff00aa"})
    assert r.status_code == 200
    assert r.json()["icon"] == "Palette"
    assert r.json()["color"] == "#ff00aa"


def test_empty_icon_and_color_fall_back_to_defaults(client):
    r = client.post("/api/categories", json={"name": "Office", "icon": "", "color": ""})
    assert r.json()["icon"] == "Layout"
    assert r.json()["color"] == "#000000"


@pytest.mark.parametrize("payload", [{"name": ""}, {"name": None}, {}, {"name": "   "}])
def test_create_category_requires_name(client, engine, payload):
    r = client.post("/api/categories", json=payload)
    assert r.status_code == 400
    assert r.json()["error"]["message"] == "Name is required"
    assert _category_count(engine) == 0


def test_create_category_rejects_non_json_body(client, engine):
    r = client.post("/api/categories", content=b"name=Math", headers={"Content-Type": "text/plain"})
    assert r.status_code == 400
    assert _category_count(engine) == 0


def test_list_categories_sorted_by_name(client):
    for name in ("Science", "Art", "Music", "Biology"):
        client.post("/api/categories", json={"name": name})
    r = client.get("/api/categories")
    assert r.status_code == 200
    assert [c["name"] for c in r.json()] == ["Art", "Biology", "Music", "Science"]


def test_list_categories_is_public_and_empty_by_default(client):
    r = client.get("/api/categories")
    assert r.status_code == 200
    assert r.json() == []


def test_duplicate_name_is_internal_error_without_detail(client):
    assert client.post("/api/categories", json={"name": "Math"}).status_code == 200
    r = client.post("/api/categories", json={"name": "Math"})
    assert r.status_code == 500
    assert r.json() == {"error": {"code": "INTERNAL_ERROR", "message": "Internal Error"}}


def test_service_validation_runs_before_any_write(engine):
    with Session(engine) as session:
        with pytest.raises(BadRequest):
            create_category(session, None)
        create_category(session, "Zoology")
        create_category(session, "Algebra")
        assert [c.name for c in list_categories(session)] == ["Algebra", "Zoology"]
