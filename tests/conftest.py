import pytest
from fastapi.testclient import TestClient

from blog_api.app.core.storage import MemStorage
from blog_api.app.main import create_app


VALID_POST = {
    "title": "Chasing Light in Lisbon",
    "excerpt": "A week of golden hours on the Tagus...",
    "content": "First paragraph.\n\nSecond paragraph.",
    "category": "Photography",
    "imageUrl": "https://images.example.org/lisbon.jpg",
    "authorName": "Ines Costa",
    "authorAvatar": "https://images.example.org/ines.jpg",
    "authorBio": "Photographer",
    "readTime": 4,
    "featured": "false",
}


@pytest.fixture
def storage():
    return MemStorage()


@pytest.fixture
def client(storage):
    with TestClient(create_app(storage)) as test_client:
        yield test_client


@pytest.fixture
def post_payload():
    return dict(VALID_POST)
