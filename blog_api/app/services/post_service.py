"""
Business logic for blog posts.

``PostService`` sits between the HTTP handlers and the storage
backend.  It is constructed per request with the store owned by the
application, so handlers never touch a global.  Most methods pass
straight through; the service adds logging and turns a like on an
unknown post into a count of zero.
"""

import logging
from typing import List, Optional

from ..core.storage import BaseStorage
from ..schemas.post import PostCreate, PostRead


class PostService:
    """Service for reading, publishing and liking posts."""

    def __init__(self, storage: BaseStorage) -> None:
        self.storage = storage

    async def list_posts(self, category: Optional[str] = None, limit: Optional[int] = None) -> List[PostRead]:
        return self.storage.list_posts(category=category, limit=limit)

    async def get_featured_posts(self) -> List[PostRead]:
        return self.storage.get_featured_posts()

    async def get_post(self, post_id: str) -> Optional[PostRead]:
        """Retrieve a post by id, or ``None`` if it does not exist."""
        return self.storage.get_post(post_id)

    async def search_posts(self, query: str) -> List[PostRead]:
        """Search title, excerpt and category for ``query``.

        The caller is responsible for rejecting empty queries.
        """
        logger = logging.getLogger(__name__)
        posts = self.storage.search_posts(query)
        logger.debug("Search for %r matched %d posts", query, len(posts))
        return posts

    async def create_post(self, data: PostCreate) -> PostRead:
        """Store a new post and return it with its server‑assigned fields."""
        logger = logging.getLogger(__name__)
        post = self.storage.create_post(data)
        logger.info("Created post %s '%s' in %s", post.id, post.title, post.category)
        return post

    async def like_post(self, post_id: str) -> int:
        """Add one like to a post and return its current like count.

        Liking an unknown post changes nothing and reports ``0``.
        """
        logger = logging.getLogger(__name__)
        self.storage.like_post(post_id)
        post = self.storage.get_post(post_id)
        if post is None:
            logger.warning("Like for unknown post %s ignored", post_id)
            return 0
        logger.info("Post %s now has %d likes", post_id, post.likes)
        return post.likes
