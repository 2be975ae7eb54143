from src.domain.errors import InternalError, NotFoundError, PermissionDeniedError
from src.domain.validators import require_valid_id
from src.domain.policies import is_owner
from src.domain.repositories.playlist_repository import PlaylistRepository

class DeletePlaylistUseCase:
    def __init__(self, playlist_repo: PlaylistRepository):
        self.playlist_repo = playlist_repo

    def execute(self, playlist_id: str, user_id: str) -> dict:
        require_valid_id(playlist_id, "playlistId")

        playlist = self.playlist_repo.get_by_id(playlist_id)
        if not playlist:
            raise NotFoundError("playlist not found")

        if not is_owner(playlist, user_id):
            raise PermissionDeniedError("Only the owner can delete their playlist")

        if not self.playlist_repo.delete(playlist_id):
            raise InternalError("failed to delete playlist please try again")
        return {}
