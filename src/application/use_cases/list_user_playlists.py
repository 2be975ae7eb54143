from typing import Any
from src.domain.validators import require_valid_id
from src.domain.repositories.playlist_repository import PlaylistRepository
from src.domain.repositories.video_repository import VideoRepository

class ListUserPlaylistsUseCase:
    def __init__(self, playlist_repo: PlaylistRepository, video_repo: VideoRepository):
        self.playlist_repo = playlist_repo
        self.video_repo = video_repo

    def execute(self, user_id: str) -> list[dict[str, Any]]:
        require_valid_id(user_id, "userId")

        playlists = self.playlist_repo.list_by_owner(user_id)

        # One batch lookup for every video referenced by any playlist
        video_ids = list(dict.fromkeys(v for p in playlists for v in p.videos))
        views = {v.id: v.views for v in self.video_repo.get_by_ids(video_ids)}

        # Transform to 'Summary' representation; dangling references are dropped by the join
        summaries = []
        for p in playlists:
            joined = [views[v] for v in p.videos if v in views]
            summaries.append({
                "id": p.id,
                "name": p.name,
                "description": p.description,
                "total_videos": len(joined),
                "total_views": sum(joined),
                "updated_at": p.updated_at
            })
        return summaries
