"""
Authorization rules for comment and playlist mutations.
"""
from typing import Any, Optional


def is_owner(entity: Any, acting_user_id: Optional[str]) -> bool:
    """
    True when `acting_user_id` is the stored owner of `entity`.
    Works for any entity exposing an `owner` attribute.
    """
    if entity is None or not acting_user_id:
        return False
    owner = getattr(entity, "owner", None)
    return owner is not None and str(owner) == str(acting_user_id)


def can_curate_playlist(playlist: Any, video: Any, acting_user_id: Optional[str]) -> bool:
    """
    Adding or removing a video is allowed when the acting user owns
    the playlist or the video.
    """
    return is_owner(playlist, acting_user_id) or is_owner(video, acting_user_id)
