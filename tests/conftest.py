"""Common test fixtures."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Generator, Optional

import pytest
from fastapi import Header, HTTPException
from fastapi.testclient import TestClient

from server import app
from src.api.auth import get_current_user, get_optional_user
from src.api.dependencies import (
    get_comment_repo,
    get_like_repo,
    get_playlist_repo,
    get_user_repo,
    get_video_repo,
)
from src.domain.entities.comment import Comment
from src.domain.entities.user import User
from src.domain.entities.video import Video
from tests.fakes import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryPlaylistRepository,
    InMemoryUserRepository,
    InMemoryVideoRepository,
    new_id,
)

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def videos() -> InMemoryVideoRepository:
    return InMemoryVideoRepository()


@pytest.fixture
def comments() -> InMemoryCommentRepository:
    return InMemoryCommentRepository()


@pytest.fixture
def likes() -> InMemoryLikeRepository:
    return InMemoryLikeRepository()


@pytest.fixture
def playlists() -> InMemoryPlaylistRepository:
    return InMemoryPlaylistRepository()


@pytest.fixture
def alice(users) -> User:
    return users.add(User(id=new_id(), username="alice", full_name="Alice Doe", avatar_url="https://cdn/a.png"))


@pytest.fixture
def bob(users) -> User:
    return users.add(User(id=new_id(), username="bob", full_name="Bob Roe", avatar_url=None))


@pytest.fixture
def alice_video(videos, alice) -> Video:
    return videos.add(Video(id=new_id(), owner=alice.id, title="Alice intro", views=100, is_published=True,
                            video_file_url="https://cdn/v1.mp4", thumbnail_url="https://cdn/v1.jpg",
                            duration=12.5, created_at=BASE_TIME))


@pytest.fixture
def bob_draft(videos, bob) -> Video:
    return videos.add(Video(id=new_id(), owner=bob.id, title="Bob draft", views=50, is_published=False,
                            created_at=BASE_TIME))


@pytest.fixture
def bob_video(videos, bob) -> Video:
    return videos.add(Video(id=new_id(), owner=bob.id, title="Bob live", views=7, is_published=True,
                            created_at=BASE_TIME))


@pytest.fixture
def make_comment(comments):
    """Store a comment `minutes` after BASE_TIME."""

    def _make(video: Video, owner: User, content: str, minutes: int = 0) -> Comment:
        when = BASE_TIME + timedelta(minutes=minutes)
        return comments.create(Comment(id="", content=content, owner=owner.id, video=video.id,
                                       created_at=when, updated_at=when))

    return _make


def _header_user(x_test_user: Optional[str] = Header(None)):
    if not x_test_user:
        raise HTTPException(status_code=401, detail="Invalid authorization header")
    return SimpleNamespace(id=x_test_user)


def _optional_header_user(x_test_user: Optional[str] = Header(None)):
    return SimpleNamespace(id=x_test_user) if x_test_user else None


@pytest.fixture
def client(users, videos, comments, likes, playlists) -> Generator[TestClient, None, None]:
    """API client backed by the in-memory repositories.

    The acting user is taken from the X-Test-User header.
    """
    app.dependency_overrides.update({
        get_user_repo: lambda: users,
        get_video_repo: lambda: videos,
        get_comment_repo: lambda: comments,
        get_like_repo: lambda: likes,
        get_playlist_repo: lambda: playlists,
        get_current_user: _header_user,
        get_optional_user: _optional_header_user,
    })
    yield TestClient(app)
    app.dependency_overrides.clear()
