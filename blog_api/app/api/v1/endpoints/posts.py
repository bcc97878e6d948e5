"""
Post endpoints.

These routes list, read, publish and like blog posts.  Listing
supports a case‑insensitive ``category`` filter (``All`` disables it)
and a ``limit``; results are always newest first.  Publishing
validates the payload before anything is stored, and unknown ids on
``GET /posts/{id}`` produce HTTP 404.
"""

import re
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from blog_api.app.api.deps import get_post_service
from blog_api.app.schemas.post import LikeResponse, PostCreate, PostRead
from blog_api.app.services.post_service import PostService

router = APIRouter()

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_limit(raw: Optional[str]) -> Optional[int]:
    """Read ``limit`` leniently; listing never fails on a bad value.

    A leading integer is used (``"3abc"`` gives 3) and negative numbers
    become 0.  Anything without a leading integer means no limit.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return max(int(match.group(1)), 0)


@router.get("", response_model=List[PostRead])
async def list_posts(
    category: Optional[str] = Query(None, description="Category name, case-insensitive; 'All' for every post"),
    limit: Optional[str] = Query(None, description="Maximum number of posts to return"),
    service: PostService = Depends(get_post_service),
) -> List[PostRead]:
    """Return posts newest first, optionally filtered by category."""
    return await service.list_posts(category=category, limit=parse_limit(limit))


@router.get("/featured", response_model=List[PostRead])
async def list_featured_posts(service: PostService = Depends(get_post_service)) -> List[PostRead]:
    """Return every featured post, newest first."""
    return await service.get_featured_posts()


@router.get("/{post_id}", response_model=PostRead)
async def get_post(post_id: str, service: PostService = Depends(get_post_service)) -> PostRead:
    """Retrieve a single post by its ID.

    Returns HTTP 404 if the post is not found.
    """
    post = await service.get_post(post_id)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return post


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED)
async def create_post(post_in: PostCreate, service: PostService = Depends(get_post_service)) -> PostRead:
    """Publish a new post.

    The response contains the stored post including its generated
    ``id``, ``likes`` (always 0) and ``createdAt``.
    """
    return await service.create_post(post_in)


@router.post("/{post_id}/like", response_model=LikeResponse)
async def like_post(post_id: str, service: PostService = Depends(get_post_service)) -> LikeResponse:
    """Add a like and return the post's like count.

    An unknown ``post_id`` is not an error here: nothing changes and the
    reported count is 0.
    """
    likes = await service.like_post(post_id)
    return LikeResponse(likes=likes)
