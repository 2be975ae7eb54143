from typing import Optional
from supabase import Client
from src.config import LIKES_TABLE
from src.domain.entities.like import Like
from src.domain.repositories.like_repository import LikeRepository
from src.infrastructure.repositories.mapping import parse_timestamp
from src.infrastructure.supabase_client import get_supabase
from src.logging_config import get_logger

logger = get_logger(__name__)

class SupabaseLikeRepository(LikeRepository):
    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    def list_by_comment_ids(self, comment_ids: list[str]) -> list[Like]:
        if not comment_ids:
            return []
        try:
            res = self.client.table(LIKES_TABLE).select("*").in_("comment", list(comment_ids)).execute()
        except Exception as e:
            logger.error("Like fetch error: %s", e)
            raise

        return [
            Like(
                id=item["id"],
                liked_by=item["liked_by"],
                comment=item.get("comment"),
                video=item.get("video"),
                created_at=parse_timestamp(item.get("created_at"))
            )
            for item in res.data or []
        ]

    def delete_by_comment(self, comment_id: str) -> int:
        try:
            res = self.client.table(LIKES_TABLE).delete().eq("comment", comment_id).execute()
        except Exception as e:
            logger.error("Like cleanup error for comment %s: %s", comment_id, e)
            raise
        return len(res.data or [])
