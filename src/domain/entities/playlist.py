from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

@dataclass
class Playlist:
    id: str
    name: str
    description: str
    owner: str
    videos: list[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def with_video(self, video_id: str) -> list[str]:
        """Membership after adding `video_id`; order kept, no duplicates."""
        if video_id in self.videos:
            return list(self.videos)
        return [*self.videos, video_id]

    def without_video(self, video_id: str) -> list[str]:
        return [v for v in self.videos if v != video_id]
