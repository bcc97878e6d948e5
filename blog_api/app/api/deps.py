"""
Shared FastAPI dependencies for API routes.
"""

from fastapi import Depends

from ..core.storage import BaseStorage, get_storage
from ..services.post_service import PostService


def get_post_service(storage: BaseStorage = Depends(get_storage)) -> PostService:
    return PostService(storage)
