"""
Top‑level router for version 1 of the API.

This router aggregates the endpoint routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import categories, forms, posts, search

router = APIRouter()

router.include_router(posts.router, prefix="/posts", tags=["posts"])
router.include_router(search.router, prefix="/search", tags=["search"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
# The forms router defines "/subscribe" and "/contact" itself.
router.include_router(forms.router, tags=["forms"])
