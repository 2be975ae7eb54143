"""
Field subsets exposed by the read models for joined entities.
"""
from typing import Any, Optional
from src.domain.entities.user import User
from src.domain.entities.video import Video


def owner_summary(user: Optional[User]) -> Optional[dict[str, Any]]:
    if user is None:
        return None
    return {
        "username": user.username,
        "full_name": user.full_name,
        "avatar_url": user.avatar_url
    }


def playlist_video_summary(video: Video) -> dict[str, Any]:
    return {
        "id": video.id,
        "video_file_url": video.video_file_url,
        "thumbnail_url": video.thumbnail_url,
        "title": video.title,
        "description": video.description,
        "duration": video.duration,
        "created_at": video.created_at,
        "views": video.views
    }
