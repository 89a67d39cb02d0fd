from __future__ import annotations


def _project(title: str, **overrides) -> dict:
    payload = {
        "title": title,
        "description": f"{title} description",
        "tags": ["Terraform", "AWS"],
        "repoUrl": "https://github.com/example/repo",
        "demoUrl": None,
        "isVisible": True,
        "isFeatured": False,
    }
    payload.update(overrides)
    return payload


def test_visible_and_featured_listings(client, admin_headers) -> None:
    for payload in (
        _project("Plain"),
        _project("Star", isFeatured=True),
        _project("Hidden star", isFeatured=True, isVisible=False),
    ):
        assert client.post("/api/admin/projects", json=payload, headers=admin_headers).status_code == 201

    assert [p["title"] for p in client.get("/api/projects").json()] == ["Plain", "Star"]
    assert [p["title"] for p in client.get("/api/projects/featured").json()] == ["Star"]
    assert [p["title"] for p in client.get("/api/featured-projects").json()] == ["Star"]

    admin_list = client.get("/api/admin/projects", headers=admin_headers).json()
    assert len(admin_list) == 3


def test_tags_are_capped_at_five(client, admin_headers) -> None:
    too_many = _project("Busy", tags=["a", "b", "c", "d", "e", "f"])
    r = client.post("/api/admin/projects", json=too_many, headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "tags"

    ok = client.post("/api/admin/projects", json=_project("Busy", tags=["a", "b", "c", "d", "e"]), headers=admin_headers)
    assert ok.status_code == 201
    assert ok.json()["tags"] == ["a", "b", "c", "d", "e"]

    r = client.put(f"/api/admin/projects/{ok.json()['id']}", json={"tags": list("abcdef")}, headers=admin_headers)
    assert r.status_code == 400


def test_update_project_keeps_tag_order(client, admin_headers) -> None:
    created = client.post("/api/admin/projects", json=_project("Ordered"), headers=admin_headers).json()
    r = client.put(
        f"/api/admin/projects/{created['id']}",
        json={"tags": ["Go", "Kubernetes", "Operator SDK"], "isFeatured": True},
        headers=admin_headers,
    )
    assert r.status_code == 200
    body = r.json()
    assert body["tags"] == ["Go", "Kubernetes", "Operator SDK"]
    assert body["isFeatured"] is True
    assert body["repoUrl"] == "https://github.com/example/repo"


def test_delete_unknown_project_is_404(client, admin_headers) -> None:
    assert client.delete("/api/admin/projects/77", headers=admin_headers).status_code == 404


def test_stored_project_over_the_tag_cap_is_still_served(client) -> None:
    from app.database import SessionLocal
    from app.models import Project

    tags = ["a", "b", "c", "d", "e", "f"]
    with SessionLocal() as db:
        db.add(Project(title="Legacy", description="Imported row", tags=tags, is_visible=True, is_featured=True))
        db.commit()

    r = client.get("/api/projects")
    assert r.status_code == 200
    assert r.json()[0]["tags"] == tags
    assert client.get("/api/projects/featured").json()[0]["title"] == "Legacy"
