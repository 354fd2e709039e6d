"""
FastAPI routers grouped by area (admin, content collections, contact,
projects, GitHub, health).

Each module exposes an APIRouter included by ``portfolio.app.create_app``.
"""
