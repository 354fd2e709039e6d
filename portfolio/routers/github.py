from __future__ import annotations

from fastapi import APIRouter, Depends

from portfolio.core.security import require_admin
from portfolio.domain.schemas import SelectedProject
from portfolio.repositories.factory import ContentStore
from portfolio.routers.deps import get_github_service, get_store
from portfolio.services.github_service import GitHubService

router = APIRouter(prefix="/api", tags=["github"])


@router.get("/github/repos/{username}")
def github_repos(username: str, github: GitHubService = Depends(get_github_service)):
    return github.list_repos(username)


@router.get("/github/repos/{username}/categorized")
def github_repos_categorized(username: str, github: GitHubService = Depends(get_github_service)):
    return github.list_categorized(username)


@router.post(
    "/selected-projects/showcase-images",
    response_model=list[SelectedProject],
    dependencies=[Depends(require_admin)],
)
def fill_showcase_images(
    github: GitHubService = Depends(get_github_service),
    store: ContentStore = Depends(get_store),
):
    return github.fill_showcase_images(store)
