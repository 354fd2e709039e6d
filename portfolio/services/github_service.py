"""
GitHub access for the projects section.

Repository listings are proxied so the browser never calls api.github.com
directly; showcase images are discovered by probing well-known file names in
the repository's ``main`` branch.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from portfolio.core.config import Settings
from portfolio.core.errors import GitHubError
from portfolio.core.logging import get_logger
from portfolio.repositories.factory import ContentStore

log = get_logger(__name__)

SHOWCASE_IMAGE_NAMES = (
    "showcaseimage.jpg",
    "showcaseimage.png",
    "showcaseimage.jpeg",
    "showcase.jpg",
    "showcase.png",
    "showcase.jpeg",
)
SHOWCASE_TIMEOUT = 5.0

ML_KEYWORDS = ("machine-learning", "ml", "ai", "neural", "tensorflow", "pytorch", "sklearn", "deep-learning")
DATA_KEYWORDS = ("data", "analysis", "analytics", "pandas", "numpy", "visualization", "sql")
WEB_KEYWORDS = (
    "web", "react", "vue", "angular", "javascript", "typescript",
    "html", "css", "frontend", "backend",
)


def categorize_repo(repo: dict) -> str:
    """Bucket a repository into ml, data, web or other by simple keyword matching."""
    name = (repo.get("name") or "").lower()
    description = (repo.get("description") or "").lower()
    topics = [str(t).lower() for t in (repo.get("topics") or [])]
    language = (repo.get("language") or "").lower()

    def _hit(keywords, *, include_language: bool = False) -> bool:
        for keyword in keywords:
            if keyword in name or keyword in description or keyword in topics:
                return True
            if include_language and language and keyword in language:
                return True
        return False

    if _hit(ML_KEYWORDS):
        return "ml"
    if _hit(DATA_KEYWORDS):
        return "data"
    if _hit(WEB_KEYWORDS, include_language=True):
        return "web"
    return "other"


def split_repo_url(html_url: str) -> tuple[str, str] | None:
    """``https://github.com/owner/repo`` -> ``("owner", "repo")``."""
    parts = (html_url or "").rstrip("/").split("/")
    if len(parts) < 5 or not parts[3] or not parts[4]:
        return None
    return parts[3], parts[4]


class GitHubService:
    def __init__(self, settings: Settings, transport: Optional[httpx.BaseTransport] = None) -> None:
        self.settings = settings
        self.transport = transport

    def _client(self, timeout: float) -> httpx.Client:
        headers = {"Accept": "application/vnd.github+json", "User-Agent": "portfolio-api"}
        if self.settings.github_token:
            headers["Authorization"] = f"Bearer {self.settings.github_token}"
        return httpx.Client(timeout=timeout, headers=headers, transport=self.transport)

    def list_repos(self, username: str) -> list[dict[str, Any]]:
        url = f"{self.settings.github_api_url}/users/{username}/repos"
        params = {"sort": "updated", "per_page": 100}
        try:
            with self._client(self.settings.github_timeout_seconds) as client:
                response = client.get(url, params=params)
        except httpx.HTTPError as exc:
            log.warning("github_request_failed", username=username, error=str(exc))
            raise GitHubError("Failed to reach GitHub") from exc
        if response.is_error:
            log.warning("github_error_status", username=username, status=response.status_code)
            raise GitHubError("Failed to fetch GitHub repos", response.status_code)
        repos = response.json()
        if not isinstance(repos, list):
            raise GitHubError("Unexpected GitHub response")
        return repos

    def list_categorized(self, username: str) -> list[dict[str, Any]]:
        return [{**repo, "category": categorize_repo(repo)} for repo in self.list_repos(username)]

    def find_showcase_image(self, owner: str, repo_name: str) -> Optional[str]:
        """Return the first showcase image URL that exists in the repo, if any."""
        with self._client(SHOWCASE_TIMEOUT) as client:
            for image_name in SHOWCASE_IMAGE_NAMES:
                image_url = f"{self.settings.github_raw_url}/{owner}/{repo_name}/main/{image_name}"
                try:
                    response = client.head(image_url)
                except httpx.HTTPError:
                    log.debug("showcase_probe_failed", repo=repo_name, image=image_name)
                    continue
                if response.is_success:
                    log.info("showcase_image_found", repo=repo_name, image=image_name)
                    return image_url
        log.info("showcase_image_missing", repo=repo_name)
        return None

    def fill_showcase_images(self, store: ContentStore) -> list:
        """Give selected projects without an image the showcase image of their repo."""
        updated = []
        for project in store.list("selected-projects"):
            if project.image_url:
                continue
            parts = split_repo_url(project.html_url)
            if not parts:
                continue
            image_url = self.find_showcase_image(*parts)
            if image_url:
                updated.append(store.update("selected-projects", project.id, {"image_url": image_url}))
        return updated
