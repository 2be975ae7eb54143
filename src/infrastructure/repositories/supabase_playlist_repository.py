from datetime import datetime, timezone
from typing import Optional
from supabase import Client
from src.config import PLAYLISTS_TABLE
from src.domain.entities.playlist import Playlist
from src.domain.repositories.playlist_repository import PlaylistRepository
from src.infrastructure.repositories.mapping import parse_timestamp, to_iso
from src.infrastructure.supabase_client import get_supabase
from src.logging_config import get_logger

logger = get_logger(__name__)

class SupabasePlaylistRepository(PlaylistRepository):
    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    def get_by_id(self, playlist_id: str) -> Optional[Playlist]:
        try:
            res = self.client.table(PLAYLISTS_TABLE).select("*").eq("id", playlist_id).limit(1).execute()
        except Exception as e:
            logger.error("Playlist fetch error for %s: %s", playlist_id, e)
            raise
        if not res.data:
            return None
        return self._map_to_entity(res.data[0])

    def list_by_owner(self, owner_id: str) -> list[Playlist]:
        try:
            res = self.client.table(PLAYLISTS_TABLE).select("*").eq("owner", owner_id).execute()
        except Exception as e:
            logger.error("Playlist list error for owner %s: %s", owner_id, e)
            raise
        return [self._map_to_entity(item) for item in res.data or []]

    def create(self, playlist: Playlist) -> Optional[Playlist]:
        data = {
            "name": playlist.name,
            "description": playlist.description,
            "owner": playlist.owner,
            "videos": list(playlist.videos),
            "created_at": to_iso(playlist.created_at),
            "updated_at": to_iso(playlist.updated_at)
        }
        if playlist.id:
            data["id"] = playlist.id

        try:
            res = self.client.table(PLAYLISTS_TABLE).insert(data).execute()
        except Exception as e:
            logger.error("Playlist create error: %s", e)
            raise
        if not res.data:
            return None
        return self._map_to_entity(res.data[0])

    def update(self, playlist_id: str, **kwargs) -> Optional[Playlist]:
        """
        Updates specific fields (name, description, videos).
        """
        payload = {**kwargs}
        payload["updated_at"] = datetime.now(timezone.utc).isoformat()

        try:
            res = (
                self.client
                .table(PLAYLISTS_TABLE)
                .update(payload)
                .eq("id", playlist_id)
                .execute()
            )
        except Exception as e:
            logger.error("Playlist update error for %s: %s", playlist_id, e)
            raise
        if not res.data:
            return None
        return self._map_to_entity(res.data[0])

    def delete(self, playlist_id: str) -> bool:
        try:
            res = self.client.table(PLAYLISTS_TABLE).delete().eq("id", playlist_id).execute()
        except Exception as e:
            logger.error("Playlist delete error for %s: %s", playlist_id, e)
            raise
        return bool(res.data)

    def _map_to_entity(self, data: dict) -> Playlist:
        return Playlist(
            id=data["id"],
            name=data["name"],
            description=data.get("description") or "",
            owner=data["owner"],
            videos=list(data.get("videos") or []),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at"))
        )
