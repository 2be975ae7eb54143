"""Tests for playlist read models and playlist mutations."""

import pytest

from src.application.use_cases.create_playlist import CreatePlaylistUseCase
from src.application.use_cases.delete_playlist import DeletePlaylistUseCase
from src.application.use_cases.get_playlist import GetPlaylistByIdUseCase
from src.application.use_cases.list_user_playlists import ListUserPlaylistsUseCase
from src.application.use_cases.playlist_videos import AddVideoToPlaylistUseCase, RemoveVideoFromPlaylistUseCase
from src.application.use_cases.update_playlist import UpdatePlaylistUseCase
from src.domain.errors import InternalError, NotFoundError, PermissionDeniedError, ValidationError
from tests.fakes import new_id


@pytest.fixture
def alice_playlist(playlists, alice):
    return CreatePlaylistUseCase(playlists).execute("Favourites", "Best of", alice.id)


@pytest.fixture
def add_video(playlists, videos):
    return AddVideoToPlaylistUseCase(playlists, videos)


@pytest.fixture
def remove_video(playlists, videos):
    return RemoveVideoFromPlaylistUseCase(playlists, videos)


@pytest.fixture
def detail(playlists, videos, users):
    return GetPlaylistByIdUseCase(playlists, videos, users)


def test_create_playlist(alice_playlist, playlists, alice):
    stored = playlists.get_by_id(alice_playlist.id)
    assert (stored.name, stored.description, stored.owner, stored.videos) == ("Favourites", "Best of", alice.id, [])


@pytest.mark.parametrize("name, description", [("", "x"), ("x", ""), ("  ", "x"), (None, "x")])
def test_create_playlist_requires_fields(playlists, alice, name, description):
    with pytest.raises(ValidationError):
        CreatePlaylistUseCase(playlists).execute(name, description, alice.id)
    assert playlists.writes == 0


def test_create_playlist_store_returns_nothing(mocker, playlists, alice):
    mocker.patch.object(playlists, "create", return_value=None)
    with pytest.raises(InternalError):
        CreatePlaylistUseCase(playlists).execute("a", "b", alice.id)


def test_list_for_user_starts_empty(alice_playlist, playlists, videos, alice):
    summaries = ListUserPlaylistsUseCase(playlists, videos).execute(alice.id)

    assert summaries == [{
        "id": alice_playlist.id,
        "name": "Favourites",
        "description": "Best of",
        "total_videos": 0,
        "total_views": 0,
        "updated_at": alice_playlist.updated_at,
    }]


def test_list_for_user_aggregates_all_videos(alice_playlist, add_video, playlists, videos, alice,
                                             alice_video, bob_draft):
    add_video.execute(alice_playlist.id, alice_video.id, alice.id)
    add_video.execute(alice_playlist.id, bob_draft.id, alice.id)
    playlists.update(alice_playlist.id, videos=[*playlists.get_by_id(alice_playlist.id).videos, new_id()])

    summary = ListUserPlaylistsUseCase(playlists, videos).execute(alice.id)[0]

    assert summary["total_videos"] == 2
    assert summary["total_views"] == 150


def test_list_for_user_only_own(alice_playlist, playlists, videos, bob):
    assert ListUserPlaylistsUseCase(playlists, videos).execute(bob.id) == []


def test_list_for_user_rejects_malformed_id(playlists, videos):
    with pytest.raises(ValidationError):
        ListUserPlaylistsUseCase(playlists, videos).execute("not-an-id")


def test_detail_hides_unpublished(alice_playlist, add_video, detail, alice, alice_video, bob_draft):
    add_video.execute(alice_playlist.id, alice_video.id, alice.id)
    add_video.execute(alice_playlist.id, bob_draft.id, alice.id)

    view = detail.execute(alice_playlist.id)

    assert [v["id"] for v in view["videos"]] == [alice_video.id]
    assert view["total_videos"] == 1
    assert view["total_views"] == alice_video.views
    assert view["owner"] == {"username": "alice", "full_name": "Alice Doe", "avatar_url": "https://cdn/a.png"}
    assert view["videos"][0] == {
        "id": alice_video.id,
        "video_file_url": "https://cdn/v1.mp4",
        "thumbnail_url": "https://cdn/v1.jpg",
        "title": "Alice intro",
        "description": "",
        "duration": 12.5,
        "created_at": alice_video.created_at,
        "views": 100,
    }


def test_detail_keeps_playlist_order(alice_playlist, add_video, detail, alice, alice_video, bob_video):
    add_video.execute(alice_playlist.id, bob_video.id, alice.id)
    add_video.execute(alice_playlist.id, alice_video.id, alice.id)

    view = detail.execute(alice_playlist.id)

    assert [v["id"] for v in view["videos"]] == [bob_video.id, alice_video.id]
    assert view["total_views"] == 107


def test_detail_without_published_videos_is_empty(alice_playlist, add_video, detail, alice, bob_draft):
    assert detail.execute(alice_playlist.id) is None
    add_video.execute(alice_playlist.id, bob_draft.id, alice.id)
    assert detail.execute(alice_playlist.id) is None


def test_detail_errors(detail):
    with pytest.raises(ValidationError):
        detail.execute("nope")
    with pytest.raises(NotFoundError):
        detail.execute(new_id())


def test_add_video_is_idempotent(alice_playlist, add_video, playlists, alice, alice_video):
    add_video.execute(alice_playlist.id, alice_video.id, alice.id)
    writes = playlists.writes
    again = add_video.execute(alice_playlist.id, alice_video.id, alice.id)

    assert again.videos == [alice_video.id]
    assert playlists.writes == writes


def test_remove_absent_video_is_noop(alice_playlist, remove_video, playlists, alice, alice_video):
    before = playlists.get_by_id(alice_playlist.id)
    writes = playlists.writes

    result = remove_video.execute(alice_playlist.id, alice_video.id, alice.id)

    assert result == before
    assert playlists.writes == writes


def test_remove_video(alice_playlist, add_video, remove_video, alice, alice_video, bob_video):
    add_video.execute(alice_playlist.id, alice_video.id, alice.id)
    add_video.execute(alice_playlist.id, bob_video.id, alice.id)

    result = remove_video.execute(alice_playlist.id, alice_video.id, alice.id)

    assert result.videos == [bob_video.id]


def test_video_owner_may_curate_foreign_playlist(alice_playlist, add_video, remove_video, bob, bob_video):
    assert add_video.execute(alice_playlist.id, bob_video.id, bob.id).videos == [bob_video.id]
    assert remove_video.execute(alice_playlist.id, bob_video.id, bob.id).videos == []


@pytest.mark.parametrize("use_case", ["add_video", "remove_video"])
def test_curation_denied_when_owning_neither(request, alice_playlist, bob, alice_video, use_case):
    with pytest.raises(PermissionDeniedError):
        request.getfixturevalue(use_case).execute(alice_playlist.id, alice_video.id, bob.id)


@pytest.mark.parametrize("use_case", ["add_video", "remove_video"])
def test_curation_validation(request, alice_playlist, alice, alice_video, use_case):
    target = request.getfixturevalue(use_case)
    with pytest.raises(ValidationError):
        target.execute("bad", alice_video.id, alice.id)
    with pytest.raises(ValidationError):
        target.execute(alice_playlist.id, "bad", alice.id)
    with pytest.raises(NotFoundError, match="playlist"):
        target.execute(new_id(), alice_video.id, alice.id)
    with pytest.raises(NotFoundError, match="video"):
        target.execute(alice_playlist.id, new_id(), alice.id)


def test_add_video_store_returns_nothing(mocker, alice_playlist, add_video, playlists, alice, alice_video):
    mocker.patch.object(playlists, "update", return_value=None)
    with pytest.raises(InternalError):
        add_video.execute(alice_playlist.id, alice_video.id, alice.id)


def test_update_playlist(alice_playlist, playlists, alice, alice_video, add_video):
    add_video.execute(alice_playlist.id, alice_video.id, alice.id)

    updated = UpdatePlaylistUseCase(playlists).execute(alice_playlist.id, "Renamed", "New text", alice.id)

    assert (updated.name, updated.description) == ("Renamed", "New text")
    assert updated.videos == [alice_video.id]
    assert updated.owner == alice.id


def test_update_playlist_guards(alice_playlist, playlists, alice, bob):
    use_case = UpdatePlaylistUseCase(playlists)

    with pytest.raises(ValidationError):
        use_case.execute("bad", "a", "b", alice.id)
    with pytest.raises(ValidationError):
        use_case.execute(alice_playlist.id, "", "b", alice.id)
    with pytest.raises(NotFoundError):
        use_case.execute(new_id(), "a", "b", alice.id)
    with pytest.raises(PermissionDeniedError):
        use_case.execute(alice_playlist.id, "a", "b", bob.id)
    assert playlists.get_by_id(alice_playlist.id).name == "Favourites"


def test_delete_playlist(alice_playlist, playlists, alice):
    assert DeletePlaylistUseCase(playlists).execute(alice_playlist.id, alice.id) == {}
    assert playlists.get_by_id(alice_playlist.id) is None


def test_delete_playlist_guards(alice_playlist, playlists, alice, bob):
    use_case = DeletePlaylistUseCase(playlists)

    with pytest.raises(ValidationError):
        use_case.execute("bad", alice.id)
    with pytest.raises(NotFoundError):
        use_case.execute(new_id(), alice.id)
    with pytest.raises(PermissionDeniedError):
        use_case.execute(alice_playlist.id, bob.id)
    assert playlists.get_by_id(alice_playlist.id) is not None


def test_delete_playlist_not_applied(mocker, alice_playlist, playlists, alice):
    mocker.patch.object(playlists, "delete", return_value=False)
    with pytest.raises(InternalError):
        DeletePlaylistUseCase(playlists).execute(alice_playlist.id, alice.id)
