"""
In‑memory storage for posts and users.

``BaseStorage`` describes the operations the rest of the application
relies on; ``MemStorage`` is the only implementation.  It keeps posts
and users in plain dictionaries keyed by id and answers every query
with a linear scan, which is fine for a collection of a few dozen
posts that lives only as long as the process.  A persistent backend
can be added later by implementing ``BaseStorage``; callers never
depend on ``MemStorage`` directly.

The store is not a module level singleton: ``create_app`` builds one
and keeps it on ``app.state.storage``, and routes receive it through
the ``get_storage`` dependency.  Tests therefore get a fresh, freshly
seeded store per application instance.

All access to the dictionaries goes through a re‑entrant lock so that
ids stay unique and like counts only grow even when sync handlers run
in the threadpool.  Posts handed to callers are copies.
"""

import logging
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, List, Optional

from fastapi import Request

from ..schemas.post import PostCreate, PostRead
from ..schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


SAMPLE_POSTS: List[dict] = [
    {
        "title": "Finding Peace in Mountain Solitude",
        "content": (
            "Discover how a solo journey through the Alps changed my perspective on life, mindfulness, "
            "and the power of disconnecting from the digital world. The mountains have always called to me, "
            "but this particular journey was different. It wasn't just about the breathtaking views or the "
            "physical challenge – it was about finding something I didn't even know I was looking for."
        ),
        "excerpt": (
            "Discover how a solo journey through the Alps changed my perspective on life, mindfulness, "
            "and the power of disconnecting from the digital world..."
        ),
        "category": "Travel",
        "image_url": "https://images.unsplash.com/photo-1506905925346-21bda4d32df4?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=500",
        "author_name": "Sarah Johnson",
        "author_avatar": "https://images.unsplash.com/photo-1494790108755-2616b612b786?ixlib=rb-4.0.3&auto=format&fit=crop&w=100&h=100",
        "author_bio": "Travel Writer",
        "read_time": 5,
        "likes": 42,
        "featured": True,
        "created_at": datetime(2024, 8, 20, 10, 0, tzinfo=timezone.utc),
    },
    {
        "title": "Minimalist Design Principles",
        "content": (
            "Learn how less can be more in creating beautiful, functional spaces that inspire creativity "
            "and promote well-being. Minimalism isn't about having less for the sake of it – it's about "
            "making room for what truly matters."
        ),
        "excerpt": "Learn how less can be more in creating beautiful, functional spaces...",
        "category": "Design",
        "image_url": "https://images.unsplash.com/photo-1586023492125-27b2c045efd7?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=300",
        "author_name": "Alex Chen",
        "author_avatar": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?ixlib=rb-4.0.3&auto=format&fit=crop&w=100&h=100",
        "author_bio": "Design Director",
        "read_time": 3,
        "likes": 28,
        "featured": True,
        "created_at": datetime(2024, 8, 19, 14, 0, tzinfo=timezone.utc),
    },
    {
        "title": "The Future of Remote Work",
        "content": (
            "Exploring how technology is reshaping the way we work and collaborate across distances. "
            "The pandemic accelerated remote work adoption, but what does the future hold for distributed teams?"
        ),
        "excerpt": "Exploring how technology is reshaping the way we work and collaborate...",
        "category": "Technology",
        "image_url": "https://images.unsplash.com/photo-1517077304055-6e89abbf09b0?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=300",
        "author_name": "Mike Rodriguez",
        "author_avatar": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?ixlib=rb-4.0.3&auto=format&fit=crop&w=100&h=100",
        "author_bio": "Tech Writer",
        "read_time": 7,
        "likes": 56,
        "featured": True,
        "created_at": datetime(2024, 8, 18, 9, 0, tzinfo=timezone.utc),
    },
    {
        "title": "Street Art Renaissance",
        "content": (
            "How urban artists are transforming city walls into galleries of social commentary and beauty. "
            "Street art has evolved from underground rebellion to mainstream recognition."
        ),
        "excerpt": "How urban artists are transforming city walls into galleries of social commentary and beauty...",
        "category": "Art",
        "image_url": "https://images.unsplash.com/photo-1541961017774-22349e4a1262?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=300",
        "author_name": "Maya Patel",
        "author_avatar": "https://images.unsplash.com/photo-1438761681033-6461ffad8d80?ixlib=rb-4.0.3&auto=format&fit=crop&w=100&h=100",
        "author_bio": "Art Critic",
        "read_time": 4,
        "likes": 24,
        "featured": False,
        "created_at": datetime(2024, 8, 17, 16, 0, tzinfo=timezone.utc),
    },
    {
        "title": "Mindful Living in 2024",
        "content": (
            "Simple practices to create more presence and intention in your daily routine. "
            "In our fast-paced world, mindfulness isn't a luxury – it's a necessity."
        ),
        "excerpt": "Simple practices to create more presence and intention in your daily routine...",
        "category": "Wellness",
        "image_url": "https://images.unsplash.com/photo-1506905925346-21bda4d32df4?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=300",
        "author_name": "Emma Davis",
        "author_avatar": "https://images.unsplash.com/photo-1494790108755-2616b612b786?ixlib=rb-4.0.3&auto=format&fit=crop&w=100&h=100",
        "author_bio": "Wellness Coach",
        "read_time": 6,
        "likes": 73,
        "featured": False,
        "created_at": datetime(2024, 8, 16, 11, 0, tzinfo=timezone.utc),
    },
    {
        "title": "Seasonal Cooking Guide",
        "content": (
            "Make the most of spring produce with these fresh and flavorful recipes. "
            "Cooking with the seasons connects us to nature and ensures we're eating at peak freshness."
        ),
        "excerpt": "Make the most of spring produce with these fresh and flavorful recipes...",
        "category": "Food",
        "image_url": "https://images.unsplash.com/photo-1556909114-f6e7ad7d3136?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=300",
        "author_name": "Chef Rodriguez",
        "author_avatar": "https://images.unsplash.com/photo-1540569014015-19a7be504e3a?ixlib=rb-4.0.3&auto=format&fit=crop&w=100&h=100",
        "author_bio": "Culinary Expert",
        "read_time": 8,
        "likes": 18,
        "featured": False,
        "created_at": datetime(2024, 8, 15, 13, 0, tzinfo=timezone.utc),
    },
]


def _newest_first(posts: List[PostRead]) -> List[PostRead]:
    # sorted() is stable, so posts sharing a timestamp keep insertion order
    return sorted(posts, key=lambda post: post.created_at, reverse=True)


class BaseStorage(ABC):
    """Operations every storage backend must provide.

    Lookups signal a missing record by returning ``None``; they never
    raise for an unknown id.
    """

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[UserRead]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[UserRead]: ...

    @abstractmethod
    def create_user(self, data: UserCreate) -> UserRead: ...

    @abstractmethod
    def list_posts(self, category: Optional[str] = None, limit: Optional[int] = None) -> List[PostRead]: ...

    @abstractmethod
    def get_post(self, post_id: str) -> Optional[PostRead]: ...

    @abstractmethod
    def get_featured_posts(self) -> List[PostRead]: ...

    @abstractmethod
    def create_post(self, data: PostCreate) -> PostRead: ...

    @abstractmethod
    def like_post(self, post_id: str) -> None: ...

    @abstractmethod
    def search_posts(self, query: str) -> List[PostRead]: ...


class MemStorage(BaseStorage):
    """Process‑lifetime storage backed by dictionaries."""

    def __init__(self, seed: bool = True) -> None:
        self._lock = threading.RLock()
        self._users: Dict[str, UserRead] = {}
        self._posts: Dict[str, PostRead] = {}
        if seed:
            self._seed_posts()

    def _seed_posts(self) -> None:
        with self._lock:
            for sample in SAMPLE_POSTS:
                post = PostRead(id=str(uuid.uuid4()), **sample)
                self._posts[post.id] = post
        logger.debug("Seeded %d sample posts", len(SAMPLE_POSTS))

    def _snapshot(self) -> List[PostRead]:
        with self._lock:
            return [post.model_copy() for post in self._posts.values()]

    # Users

    def get_user(self, user_id: str) -> Optional[UserRead]:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user else None

    def get_user_by_username(self, username: str) -> Optional[UserRead]:
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return user.model_copy()
        return None

    def create_user(self, data: UserCreate) -> UserRead:
        with self._lock:
            user_id = self._new_id(self._users)
            user = UserRead(id=user_id, **data.model_dump())
            self._users[user_id] = user
            return user.model_copy()

    # Posts

    def list_posts(self, category: Optional[str] = None, limit: Optional[int] = None) -> List[PostRead]:
        """Return posts newest first, optionally filtered and truncated.

        ``category`` is compared case‑insensitively; ``"All"`` (in any
        casing) and an empty value disable the filter.  ``limit`` is
        applied after sorting and filtering.
        """
        posts = _newest_first(self._snapshot())
        if category and category.lower() != "all":
            wanted = category.lower()
            posts = [post for post in posts if post.category.lower() == wanted]
        if limit is not None:
            posts = posts[:limit]
        return posts

    def get_post(self, post_id: str) -> Optional[PostRead]:
        with self._lock:
            post = self._posts.get(post_id)
            return post.model_copy() if post else None

    def get_featured_posts(self) -> List[PostRead]:
        return _newest_first([post for post in self._snapshot() if post.featured])

    def create_post(self, data: PostCreate) -> PostRead:
        with self._lock:
            post_id = self._new_id(self._posts)
            post = PostRead(
                id=post_id,
                likes=0,
                created_at=datetime.now(timezone.utc),
                **data.model_dump(),
            )
            self._posts[post_id] = post
            return post.model_copy()

    def like_post(self, post_id: str) -> None:
        with self._lock:
            post = self._posts.get(post_id)
            if post is not None:
                post.likes += 1

    def search_posts(self, query: str) -> List[PostRead]:
        """Substring match on title, excerpt and category.

        Results keep storage order; there is no ranking.
        """
        term = query.lower()
        return [
            post
            for post in self._snapshot()
            if term in post.title.lower() or term in post.excerpt.lower() or term in post.category.lower()
        ]

    @staticmethod
    def _new_id(existing: Dict[str, object]) -> str:
        while True:
            candidate = str(uuid.uuid4())
            if candidate not in existing:
                return candidate


def get_storage(request: Request) -> BaseStorage:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.storage
