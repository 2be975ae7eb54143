from abc import ABC, abstractmethod
from typing import Optional
from src.domain.entities.video import Video

class VideoRepository(ABC):
    @abstractmethod
    def get_by_id(self, video_id: str) -> Optional[Video]:
        pass

    @abstractmethod
    def get_by_ids(self, video_ids: list[str]) -> list[Video]:
        pass
