from src.domain.validators import is_filled
from src.domain.entities.playlist import Playlist
from src.domain.errors import InternalError, NotFoundError, PermissionDeniedError, ValidationError
from src.domain.validators import require_valid_id
from src.domain.policies import is_owner
from src.domain.repositories.playlist_repository import PlaylistRepository

class UpdatePlaylistUseCase:
    def __init__(self, playlist_repo: PlaylistRepository):
        self.playlist_repo = playlist_repo

    def execute(self, playlist_id: str, name: str, description: str, user_id: str) -> Playlist:
        """
        Renames the playlist and replaces its description.
        """
        require_valid_id(playlist_id, "playlistId")
        if not is_filled(name) or not is_filled(description):
            raise ValidationError("name and description are required")

        # 1. Security: Verify ownership
        playlist = self.playlist_repo.get_by_id(playlist_id)
        if not playlist:
            raise NotFoundError("playlist not found")

        if not is_owner(playlist, user_id):
            raise PermissionDeniedError("Only the owner can update their playlist")

        # 2. Update via Repository
        updated_playlist = self.playlist_repo.update(playlist_id, name=name, description=description)
        if not updated_playlist:
            raise InternalError("failed to update playlist please try again")
        return updated_playlist
