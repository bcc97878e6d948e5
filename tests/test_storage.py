import threading

from blog_api.app.core.storage import SAMPLE_POSTS, MemStorage
from blog_api.app.schemas.post import PostCreate
from blog_api.app.schemas.user import UserCreate


def make_post(**overrides):
    data = {
        "title": "Untitled",
        "excerpt": "Short excerpt",
        "content": "Body",
        "category": "Lifestyle",
        "image_url": "https://img.example.org/a.jpg",
        "author_name": "Sam Lee",
        "author_avatar": "https://img.example.org/sam.jpg",
        "read_time": 2,
    }
    data.update(overrides)
    return PostCreate(**data)


def test_seeds_six_sample_posts(storage):
    posts = storage.list_posts()
    assert len(posts) == 6
    assert {post.title for post in posts} == {sample["title"] for sample in SAMPLE_POSTS}


def test_unseeded_store_is_empty():
    assert MemStorage(seed=False).list_posts() == []


def test_list_posts_newest_first_and_stable(storage):
    posts = storage.list_posts()
    dates = [post.created_at for post in posts]
    assert dates == sorted(dates, reverse=True)
    assert [post.id for post in storage.list_posts()] == [post.id for post in posts]


def test_list_posts_all_is_unfiltered(storage):
    unfiltered = [post.id for post in storage.list_posts()]
    assert [post.id for post in storage.list_posts(category="All")] == unfiltered
    assert [post.id for post in storage.list_posts(category="all")] == unfiltered


def test_list_posts_category_is_case_insensitive(storage):
    for category in ("travel", "TRAVEL", "Travel"):
        posts = storage.list_posts(category=category)
        assert [post.title for post in posts] == ["Finding Peace in Mountain Solitude"]
    assert storage.list_posts(category="Business") == []


def test_list_posts_limit_returns_most_recent(storage):
    everything = storage.list_posts()
    limited = storage.list_posts(limit=2)
    assert [post.id for post in limited] == [post.id for post in everything[:2]]
    assert storage.list_posts(limit=0) == []
    assert len(storage.list_posts(limit=100)) == 6


def test_limit_applies_after_category_filter(storage):
    storage.create_post(make_post(title="Fresh travel notes", category="travel"))
    posts = storage.list_posts(category="Travel", limit=1)
    assert [post.title for post in posts] == ["Fresh travel notes"]


def test_featured_posts_seed_order(storage):
    titles = [post.title for post in storage.get_featured_posts()]
    assert titles == [
        "Finding Peace in Mountain Solitude",
        "Minimalist Design Principles",
        "The Future of Remote Work",
    ]
    assert all(post.featured for post in storage.get_featured_posts())


def test_search_matches_title_excerpt_and_category(storage):
    titles = {post.title for post in storage.search_posts("design")}
    assert "Minimalist Design Principles" in titles

    titles = {post.title for post in storage.search_posts("GALLERIES")}
    assert titles == {"Street Art Renaissance"}

    titles = {post.title for post in storage.search_posts("wellness")}
    assert titles == {"Mindful Living in 2024"}

    assert storage.search_posts("no such thing anywhere") == []


def test_search_ignores_content(storage):
    assert storage.search_posts("necessity") == []


def test_search_is_exact_on_fields(storage):
    term = "re"
    expected = {
        post.id
        for post in storage.list_posts()
        if term in post.title.lower() or term in post.excerpt.lower() or term in post.category.lower()
    }
    assert {post.id for post in storage.search_posts(term)} == expected


def test_create_post_assigns_server_fields(storage):
    post = storage.create_post(make_post(title="Hello"))
    assert post.likes == 0
    assert post.created_at.tzinfo is not None
    assert storage.list_posts()[0].id == post.id
    assert len(storage.list_posts()) == 7


def test_create_post_round_trip(storage):
    created = storage.create_post(make_post(title="Round trip", author_bio="Bio", featured=True))
    fetched = storage.get_post(created.id)
    assert fetched == created


def test_created_ids_are_unique(storage):
    seeded = {post.id for post in storage.list_posts()}
    ids = {storage.create_post(make_post(title=f"Post {i}")).id for i in range(50)}
    assert len(ids) == 50
    assert not ids & seeded


def test_get_post_unknown_returns_none(storage):
    assert storage.get_post("nonexistent-id") is None


def test_like_post_increments_by_one(storage):
    post = storage.list_posts()[0]
    for _ in range(3):
        storage.like_post(post.id)
    assert storage.get_post(post.id).likes == post.likes + 3


def test_like_unknown_post_changes_nothing(storage):
    before = {post.id: post.likes for post in storage.list_posts()}
    storage.like_post("nonexistent-id")
    assert {post.id: post.likes for post in storage.list_posts()} == before


def test_returned_posts_are_copies(storage):
    post = storage.list_posts()[0]
    post.likes = 10_000
    assert storage.get_post(post.id).likes != 10_000


def test_concurrent_likes_are_not_lost(storage):
    post = storage.list_posts()[0]

    def like_many():
        for _ in range(200):
            storage.like_post(post.id)

    threads = [threading.Thread(target=like_many) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert storage.get_post(post.id).likes == post.likes + 1600


def test_users(storage):
    user = storage.create_user(UserCreate(username="sarah", password="secret"))
    assert storage.get_user(user.id) == user
    assert storage.get_user_by_username("sarah") == user
    assert storage.get_user_by_username("nobody") is None
    assert storage.get_user("missing") is None
