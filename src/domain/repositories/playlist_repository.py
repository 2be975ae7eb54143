from abc import ABC, abstractmethod
from typing import Optional
from src.domain.entities.playlist import Playlist

class PlaylistRepository(ABC):
    @abstractmethod
    def get_by_id(self, playlist_id: str) -> Optional[Playlist]:
        pass

    @abstractmethod
    def list_by_owner(self, owner_id: str) -> list[Playlist]:
        pass

    @abstractmethod
    def create(self, playlist: Playlist) -> Optional[Playlist]:
        pass

    @abstractmethod
    def update(self, playlist_id: str, **kwargs) -> Optional[Playlist]:
        pass

    @abstractmethod
    def delete(self, playlist_id: str) -> bool:
        pass
