from __future__ import annotations

import httpx
import pytest

from portfolio.core.config import get_settings
from portfolio.core.errors import GitHubError
from portfolio.services.github_service import GitHubService, categorize_repo, split_repo_url

REPOS = [
    {"id": 1, "name": "tf-classifier", "description": "Image model", "topics": ["tensorflow"], "language": "Python"},
    {"id": 2, "name": "sales-dashboard", "description": "Pandas analysis", "topics": [], "language": "Python"},
    {"id": 3, "name": "site", "description": None, "topics": [], "language": "TypeScript"},
    {"id": 4, "name": "dotfiles", "description": "shell config", "topics": [], "language": "Shell"},
]


def _service(handler, settings=None) -> GitHubService:
    return GitHubService(settings or get_settings(), transport=httpx.MockTransport(handler))


def test_categorize_repo_buckets():
    assert [categorize_repo(repo) for repo in REPOS] == ["ml", "data", "web", "other"]
    assert categorize_repo({}) == "other"


def test_split_repo_url():
    assert split_repo_url("https://github.com/octo/hello/") == ("octo", "hello")
    assert split_repo_url("https://github.com/octo") is None
    assert split_repo_url("") is None


def test_list_repos_sends_expected_query(settings_env):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=REPOS)

    repos = _service(handler).list_repos("octo")
    assert len(repos) == 4
    assert seen["path"] == "/users/octo/repos"
    assert seen["params"] == {"sort": "updated", "per_page": "100"}


def test_list_repos_maps_errors(settings_env):
    with pytest.raises(GitHubError) as not_found:
        _service(lambda request: httpx.Response(404, json={"message": "Not Found"})).list_repos("ghost")
    assert not_found.value.status_code == 404
    assert not_found.value.to_body() == {"error": "Failed to fetch GitHub repos"}

    def offline(request):
        raise httpx.ConnectError("offline", request=request)

    with pytest.raises(GitHubError) as unreachable:
        _service(offline).list_repos("octo")
    assert unreachable.value.status_code == 502


def test_proxy_endpoints(app, client):
    app.state.github = _service(lambda request: httpx.Response(200, json=REPOS), app.state.settings)
    plain = client.get("/api/github/repos/octo").json()
    assert [repo["id"] for repo in plain] == [1, 2, 3, 4]
    categorized = client.get("/api/github/repos/octo/categorized").json()
    assert [repo["category"] for repo in categorized] == ["ml", "data", "web", "other"]

    app.state.github = _service(lambda request: httpx.Response(403), app.state.settings)
    resp = client.get("/api/github/repos/octo")
    assert resp.status_code == 403
    assert resp.json() == {"error": "Failed to fetch GitHub repos"}


def test_showcase_probe_returns_first_hit(settings_env):
    probed = []

    def handler(request: httpx.Request) -> httpx.Response:
        probed.append(request.url.path)
        assert request.method == "HEAD"
        return httpx.Response(200 if request.url.path.endswith("showcase.png") else 404)

    url = _service(handler).find_showcase_image("octo", "hello")
    assert url == "https://raw.githubusercontent.com/octo/hello/main/showcase.png"
    assert probed[0] == "/octo/hello/main/showcaseimage.jpg"
    assert probed[-1] == "/octo/hello/main/showcase.png"

    assert _service(lambda request: httpx.Response(404)).find_showcase_image("octo", "bare") is None


def test_fill_showcase_images_endpoint(app, client, admin_headers):
    for repo_id, image in ((1, None), (2, "https://cdn/existing.png")):
        client.post(
            "/api/selected-projects",
            json={"githubRepoId": repo_id, "name": f"r{repo_id}", "htmlUrl": f"https://github.com/octo/r{repo_id}", "imageUrl": image},
            headers=admin_headers,
        )
    app.state.github = _service(
        lambda request: httpx.Response(200 if request.url.path.endswith("showcaseimage.jpg") else 404),
        app.state.settings,
    )
    assert client.post("/api/selected-projects/showcase-images").status_code == 401
    resp = client.post("/api/selected-projects/showcase-images", headers=admin_headers)
    assert resp.status_code == 200
    updated = resp.json()
    assert [p["githubRepoId"] for p in updated] == [1]
    assert updated[0]["imageUrl"] == "https://raw.githubusercontent.com/octo/r1/main/showcaseimage.jpg"
    projects = client.get("/api/selected-projects").json()
    assert projects[1]["imageUrl"] == "https://cdn/existing.png"
