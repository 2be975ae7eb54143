from typing import Optional
from supabase import Client
from src.config import VIDEOS_TABLE
from src.domain.entities.video import Video
from src.domain.repositories.video_repository import VideoRepository
from src.infrastructure.repositories.mapping import parse_timestamp
from src.infrastructure.supabase_client import get_supabase
from src.logging_config import get_logger

logger = get_logger(__name__)

class SupabaseVideoRepository(VideoRepository):
    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    def get_by_id(self, video_id: str) -> Optional[Video]:
        try:
            res = self.client.table(VIDEOS_TABLE).select("*").eq("id", video_id).limit(1).execute()
        except Exception as e:
            logger.error("Video fetch error for %s: %s", video_id, e)
            raise
        if not res.data:
            return None
        return self._map_to_entity(res.data[0])

    def get_by_ids(self, video_ids: list[str]) -> list[Video]:
        if not video_ids:
            return []
        try:
            res = self.client.table(VIDEOS_TABLE).select("*").in_("id", list(video_ids)).execute()
        except Exception as e:
            logger.error("Video batch fetch error: %s", e)
            raise
        return [self._map_to_entity(item) for item in res.data or []]

    def _map_to_entity(self, data: dict) -> Video:
        return Video(
            id=data["id"],
            owner=data["owner"],
            title=data.get("title", "Untitled"),
            description=data.get("description") or "",
            video_file_url=data.get("video_file_url"),
            thumbnail_url=data.get("thumbnail_url"),
            duration=data.get("duration") or 0.0,
            views=data.get("views") or 0,
            is_published=data.get("is_published", True),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at"))
        )
