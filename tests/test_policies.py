"""Tests for the ownership rules and id validation."""

from types import SimpleNamespace

import pytest

from src.domain.errors import ValidationError
from src.domain.policies import can_curate_playlist, is_owner
from src.domain.validators import is_filled, is_valid_id, require_valid_id

OWNER = "0b7c2f7e-0d55-4b1a-9d1e-3f1c2a6b9e10"
OTHER = "5a1d9c44-8c3e-4f0b-a8a1-7d2b6e3c1f22"


def test_is_owner_matches_stored_owner():
    assert is_owner(SimpleNamespace(owner=OWNER), OWNER)
    assert not is_owner(SimpleNamespace(owner=OWNER), OTHER)


def test_is_owner_rejects_missing_values():
    assert not is_owner(None, OWNER)
    assert not is_owner(SimpleNamespace(owner=OWNER), None)
    assert not is_owner(SimpleNamespace(owner=None), OWNER)


@pytest.mark.parametrize("playlist_owner, video_owner, allowed", [
    (OWNER, OWNER, True),
    (OWNER, OTHER, True),
    (OTHER, OWNER, True),
    (OTHER, OTHER, False),
])
def test_curation_needs_either_owner(playlist_owner, video_owner, allowed):
    playlist = SimpleNamespace(owner=playlist_owner)
    video = SimpleNamespace(owner=video_owner)
    assert can_curate_playlist(playlist, video, OWNER) is allowed


def test_id_validation():
    assert is_valid_id(OWNER)
    assert not is_valid_id("not-a-uuid")
    assert not is_valid_id(None)
    with pytest.raises(ValidationError, match="playlistId is invalid"):
        require_valid_id("123", "playlistId")


def test_is_filled():
    assert is_filled("x")
    assert not is_filled("")
    assert not is_filled("   ")
    assert not is_filled(None)
