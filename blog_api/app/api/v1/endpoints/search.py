"""
Search endpoint.

``GET /search?q=...`` matches the query case‑insensitively against
post titles, excerpts and categories.  The web client only calls it
once the user has typed more than two characters, but the API itself
searches any non‑empty query as given, whitespace included.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from blog_api.app.api.deps import get_post_service
from blog_api.app.schemas.post import PostRead
from blog_api.app.services.post_service import PostService

router = APIRouter()


@router.get("", response_model=List[PostRead])
async def search_posts(
    q: Optional[str] = Query(None, description="Text to look for"),
    service: PostService = Depends(get_post_service),
) -> List[PostRead]:
    if not q:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Search query is required")
    return await service.search_posts(q)
