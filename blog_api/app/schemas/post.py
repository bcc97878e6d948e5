"""
Pydantic models for blog posts.

``PostBase`` carries the fields a writer submits, ``PostCreate`` is
the request body for publishing a story and ``PostRead`` adds the
server‑assigned ``id``, ``likes`` and ``created_at`` fields.  JSON
payloads use camelCase keys (``imageUrl``, ``readTime`` ...) because
that is what the web client sends and expects; snake_case names are
accepted as well.

``featured`` is a real boolean on the Python side.  On the wire it is
rendered as the string ``"true"`` or ``"false"``, which is the format
existing clients compare against.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_serializer, field_validator
from pydantic.alias_generators import to_camel

# Display taxonomy used by the client for category tabs.  Storage does
# not restrict ``category`` to these values.
CATEGORIES = [
    "All",
    "Design",
    "Technology",
    "Travel",
    "Lifestyle",
    "Photography",
    "Art",
    "Wellness",
    "Food",
    "Business",
]

_REQUIRED_TEXT_LABELS = {
    "title": "Title",
    "excerpt": "Excerpt",
    "content": "Content",
    "category": "Category",
    "image_url": "Image URL",
    "author_name": "Author name",
    "author_avatar": "Author avatar",
}


class PostBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., examples=["Finding Peace in Mountain Solitude"])
    excerpt: str = Field(..., examples=["Discover how a solo journey through the Alps..."])
    content: str = Field(..., description="Post body; paragraphs are separated by a blank line")
    category: str = Field(..., examples=["Travel"])
    image_url: str = Field(..., examples=["https://images.unsplash.com/photo-1506905925346-21bda4d32df4"])
    author_name: str = Field(..., examples=["Sarah Johnson"])
    author_avatar: str = Field(..., examples=["https://images.unsplash.com/photo-1494790108755-2616b612b786"])
    author_bio: Optional[str] = Field(None, examples=["Travel Writer"])
    read_time: int = Field(..., strict=True, description="Estimated reading time in minutes", examples=[5])
    featured: bool = Field(False, examples=["false"])


class PostCreate(PostBase):
    """Schema for publishing a new post.

    Every text field except ``authorBio`` must be non‑empty and
    ``readTime`` must be a positive integer.  Server‑assigned fields
    (``id``, ``likes``, ``createdAt``) are ignored if present.
    """

    @field_validator(*_REQUIRED_TEXT_LABELS)
    @classmethod
    def require_text(cls, v: str, info: ValidationInfo) -> str:
        if not v.strip():
            raise ValueError(f"{_REQUIRED_TEXT_LABELS[info.field_name]} is required")
        return v

    @field_validator("read_time")
    @classmethod
    def require_positive_read_time(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Read time must be a positive integer")
        return v


class PostRead(PostBase):
    """Schema for reading a post from the API."""

    id: str
    likes: int = 0
    created_at: datetime

    @field_serializer("featured")
    def serialize_featured(self, featured: bool) -> str:
        return "true" if featured else "false"


class LikeResponse(BaseModel):
    """Like count returned after liking a post."""

    likes: int
