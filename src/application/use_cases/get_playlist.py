from typing import Any, Optional
from src.application.projections import owner_summary, playlist_video_summary
from src.domain.errors import NotFoundError
from src.domain.validators import require_valid_id
from src.domain.repositories.playlist_repository import PlaylistRepository
from src.domain.repositories.user_repository import UserRepository
from src.domain.repositories.video_repository import VideoRepository

class GetPlaylistByIdUseCase:
    def __init__(self, playlist_repo: PlaylistRepository, video_repo: VideoRepository, user_repo: UserRepository):
        self.playlist_repo = playlist_repo
        self.video_repo = video_repo
        self.user_repo = user_repo

    def execute(self, playlist_id: str) -> Optional[dict[str, Any]]:
        """
        Detail view of a playlist restricted to its published videos.

        Returns None when the playlist exists but none of its videos is
        published; callers get an empty payload rather than a 404 there.
        """
        require_valid_id(playlist_id, "playlistId")

        playlist = self.playlist_repo.get_by_id(playlist_id)
        if not playlist:
            raise NotFoundError("playlist not found")

        # 1. Join videos, keeping playlist order
        by_id = {v.id: v for v in self.video_repo.get_by_ids(playlist.videos)}
        videos = [by_id[v] for v in playlist.videos if v in by_id]

        # 2. Only published videos are visible
        videos = [v for v in videos if v.is_published]
        if not videos:
            return None

        # 3. Join owner
        owners = self.user_repo.get_by_ids([playlist.owner])
        owner = owners[0] if owners else None

        return {
            "id": playlist.id,
            "name": playlist.name,
            "description": playlist.description,
            "created_at": playlist.created_at,
            "updated_at": playlist.updated_at,
            "total_videos": len(videos),
            "total_views": sum(v.views for v in videos),
            "videos": [playlist_video_summary(v) for v in videos],
            "owner": owner_summary(owner)
        }
