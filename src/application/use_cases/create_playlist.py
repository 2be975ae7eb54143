from datetime import datetime, timezone
from src.domain.entities.playlist import Playlist
from src.domain.errors import InternalError, ValidationError
from src.domain.repositories.playlist_repository import PlaylistRepository
from src.domain.validators import is_filled

class CreatePlaylistUseCase:
    def __init__(self, playlist_repo: PlaylistRepository):
        self.playlist_repo = playlist_repo

    def execute(self, name: str, description: str, owner_id: str) -> Playlist:
        if not is_filled(name) or not is_filled(description):
            raise ValidationError("name and description both are required")

        now = datetime.now(timezone.utc)
        playlist = self.playlist_repo.create(Playlist(
            id="",  # Let DB handle it
            name=name,
            description=description,
            owner=owner_id,
            videos=[],
            created_at=now,
            updated_at=now
        ))

        if not playlist:
            raise InternalError("failed to create playlist")
        return playlist
