"""API v1 router aggregating all endpoint routers.

All endpoints are mounted under the ``api.v1_prefix`` setting
(``/api/v1/recipe-finder`` by default).
"""

from __future__ import annotations

from fastapi import APIRouter

from recipe_finder.api.v1.endpoints import health, recipes, search


router = APIRouter()

router.include_router(health.router)
router.include_router(search.router)
router.include_router(recipes.router)
