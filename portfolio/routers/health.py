from fastapi import APIRouter, Depends

from portfolio.repositories.factory import ContentStore
from portfolio.routers.deps import get_store

router = APIRouter(tags=["health"])


@router.get("/api/health")
def health(store: ContentStore = Depends(get_store)):
    return {"status": "ok", "storage": store.backend}
