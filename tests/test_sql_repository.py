"""
Smoke tests for the SQLRepository against a temporary SQLite database.
"""
from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from portfolio.app import create_app
from portfolio.repositories.sql_repository import SQLRepository


def test_collection_crud_flow(sql_env):
    repo = SQLRepository()
    created = repo.add("skills", {"name": "Python", "category": "Programming", "featured": True})
    assert created.id == 1
    assert created.created_at is not None

    fetched = repo.get("skills", created.id)
    assert fetched.name == "Python"
    assert fetched.featured is True

    updated = repo.update("skills", created.id, {"logo_url": "https://logo", "id": 50})
    assert updated.id == created.id
    assert updated.logo_url == "https://logo"
    assert updated.name == "Python"
    assert repo.update("skills", 99, {"name": "Go"}) is None

    assert repo.delete("skills", created.id) is True
    assert repo.delete("skills", created.id) is False
    assert repo.list("skills") == []


def test_datetime_strings_are_parsed(sql_env):
    repo = SQLRepository()
    post = repo.add(
        "linkedin-posts",
        {"title": "Launch", "content": "Shipped", "post_url": "https://linkedin.com/p/1", "published_at": "2024-06-01T10:00:00Z"},
    )
    assert isinstance(post.published_at, datetime)
    assert post.published_at.year == 2024
    assert post.likes == 0


def test_reorder_and_display_order(sql_env):
    repo = SQLRepository()
    for name in ("a", "b", "c"):
        repo.add("skills", {"name": name, "category": "Tools"})
    arranged = repo.reorder("skills", [2, 3])
    assert [s.name for s in arranged] == ["b", "c", "a"]
    assert [s.name for s in repo.list("skills")] == ["b", "c", "a"]

    for repo_id in (1, 2):
        repo.add("selected-projects", {"github_repo_id": repo_id, "name": f"r{repo_id}", "html_url": f"https://github.com/me/r{repo_id}"})
    assert [p.display_order for p in repo.list("selected-projects")] == [0, 1]
    repo.reorder("selected-projects", [2, 1])
    assert [p.github_repo_id for p in repo.list("selected-projects")] == [2, 1]

    with pytest.raises(ValueError):
        repo.reorder("projects", [1])


def test_contact_info_single_row(sql_env):
    repo = SQLRepository()
    assert repo.get_contact_info() is None
    info = repo.put_contact_info({"email": "me@example.com"})
    assert info.id == 1
    again = repo.put_contact_info({"email": "other@example.com", "location": "Oslo"})
    assert again.id == 1
    assert repo.get_contact_info().email == "other@example.com"
    assert repo.update_contact_info(3, {"location": "Bergen"}) is None
    assert repo.update_contact_info(1, {"location": "Bergen"}).location == "Bergen"


def test_seed_defaults_only_fills_empty_tables(sql_env):
    repo = SQLRepository()
    repo.add("skills", {"name": "Mine", "category": "Custom"})
    seeded = repo.seed_defaults()
    assert "skills" not in seeded
    assert {"contact-info", "blogs", "certifications"} <= set(seeded)
    assert [s.name for s in repo.list("skills")] == ["Mine"]
    assert repo.seed_defaults() == []


def test_api_runs_on_sql_backend(sql_env):
    headers = {"Authorization": "Bearer test-admin-token"}
    with TestClient(create_app()) as client:
        assert client.get("/api/health").json() == {"status": "ok", "storage": "sql"}
        resp = client.post(
            "/api/certifications",
            json={"title": "CKA", "issuer": "CNCF", "year": "2024", "description": "Kubernetes admin"},
            headers=headers,
        )
        assert resp.status_code == 200
        assert client.get("/api/certifications/1").json()["description"] == "Kubernetes admin"
