"""
Category endpoint.

Returns the display taxonomy the client uses for its category tabs.
``All`` comes first and means "no filter" on ``GET /posts``.
"""

from typing import List

from fastapi import APIRouter

from blog_api.app.schemas.post import CATEGORIES

router = APIRouter()


@router.get("", response_model=List[str])
async def list_categories() -> List[str]:
    return list(CATEGORIES)
