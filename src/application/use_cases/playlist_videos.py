from src.domain.entities.playlist import Playlist
from src.domain.entities.video import Video
from src.domain.errors import InternalError, NotFoundError, PermissionDeniedError
from src.domain.validators import require_valid_id
from src.domain.policies import can_curate_playlist
from src.domain.repositories.playlist_repository import PlaylistRepository
from src.domain.repositories.video_repository import VideoRepository

class _PlaylistMembershipUseCase:
    """
    Shared checks for changing which videos a playlist holds.
    Membership behaves as a set, so a change that would leave the list
    as it is returns the stored playlist without writing.
    """

    def __init__(self, playlist_repo: PlaylistRepository, video_repo: VideoRepository):
        self.playlist_repo = playlist_repo
        self.video_repo = video_repo

    def _load(self, playlist_id: str, video_id: str, user_id: str) -> tuple[Playlist, Video]:
        require_valid_id(playlist_id, "playlistId")
        require_valid_id(video_id, "videoId")

        playlist = self.playlist_repo.get_by_id(playlist_id)
        if not playlist:
            raise NotFoundError("playlist not found")

        video = self.video_repo.get_by_id(video_id)
        if not video:
            raise NotFoundError("video not found")

        if not can_curate_playlist(playlist, video, user_id):
            raise PermissionDeniedError("Only the playlist or video owner can change this playlist")

        return playlist, video

    def _save(self, playlist: Playlist, videos: list[str]) -> Playlist:
        if videos == playlist.videos:
            return playlist

        updated_playlist = self.playlist_repo.update(playlist.id, videos=videos)
        if not updated_playlist:
            raise InternalError("failed to update playlist videos please try again")
        return updated_playlist


class AddVideoToPlaylistUseCase(_PlaylistMembershipUseCase):
    def execute(self, playlist_id: str, video_id: str, user_id: str) -> Playlist:
        playlist, video = self._load(playlist_id, video_id, user_id)
        return self._save(playlist, playlist.with_video(video.id))


class RemoveVideoFromPlaylistUseCase(_PlaylistMembershipUseCase):
    def execute(self, playlist_id: str, video_id: str, user_id: str) -> Playlist:
        playlist, video = self._load(playlist_id, video_id, user_id)
        return self._save(playlist, playlist.without_video(video.id))
