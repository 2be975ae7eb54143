from datetime import datetime, timezone
from typing import Optional
from postgrest.exceptions import APIError
from supabase import Client
from src.config import COMMENTS_TABLE
from src.domain.entities.comment import Comment
from src.domain.repositories.comment_repository import CommentRepository
from src.infrastructure.repositories.mapping import parse_timestamp, to_iso
from src.infrastructure.supabase_client import get_supabase
from src.logging_config import get_logger

logger = get_logger(__name__)

RANGE_NOT_SATISFIABLE = "PGRST103"

class SupabaseCommentRepository(CommentRepository):
    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    def get_by_id(self, comment_id: str) -> Optional[Comment]:
        try:
            res = self.client.table(COMMENTS_TABLE).select("*").eq("id", comment_id).limit(1).execute()
        except Exception as e:
            logger.error("Comment fetch error for %s: %s", comment_id, e)
            raise
        if not res.data:
            return None
        return self._map_to_entity(res.data[0])

    def page_by_video(self, video_id: str, offset: int, limit: int) -> tuple[list[Comment], int]:
        try:
            res = (
                self.client
                .table(COMMENTS_TABLE)
                .select("*", count="exact")
                .eq("video", video_id)
                .order("created_at", desc=True)
                .range(offset, offset + limit - 1)
                .execute()
            )
        except APIError as e:
            # PostgREST rejects a range that starts past the last row
            if e.code != RANGE_NOT_SATISFIABLE:
                logger.error("Comment page fetch error for video %s: %s", video_id, e)
                raise
            return [], self._count_by_video(video_id)
        except Exception as e:
            logger.error("Comment page fetch error for video %s: %s", video_id, e)
            raise

        comments = [self._map_to_entity(item) for item in res.data or []]
        return comments, res.count or 0

    def _count_by_video(self, video_id: str) -> int:
        try:
            res = (
                self.client
                .table(COMMENTS_TABLE)
                .select("id", count="exact", head=True)
                .eq("video", video_id)
                .execute()
            )
        except Exception as e:
            logger.error("Comment count error for video %s: %s", video_id, e)
            raise
        return res.count or 0

    def create(self, comment: Comment) -> Optional[Comment]:
        data = {
            "content": comment.content,
            "owner": comment.owner,
            "video": comment.video,
            "created_at": to_iso(comment.created_at),
            "updated_at": to_iso(comment.updated_at)
        }
        if comment.id:
            data["id"] = comment.id

        try:
            res = self.client.table(COMMENTS_TABLE).insert(data).execute()
        except Exception as e:
            logger.error("Comment create error: %s", e)
            raise
        if not res.data:
            return None
        return self._map_to_entity(res.data[0])

    def update_content(self, comment_id: str, content: str) -> Optional[Comment]:
        payload = {
            "content": content,
            "updated_at": datetime.now(timezone.utc).isoformat()
        }
        try:
            res = self.client.table(COMMENTS_TABLE).update(payload).eq("id", comment_id).execute()
        except Exception as e:
            logger.error("Comment update error for %s: %s", comment_id, e)
            raise
        if not res.data:
            return None
        return self._map_to_entity(res.data[0])

    def delete(self, comment_id: str) -> bool:
        try:
            res = self.client.table(COMMENTS_TABLE).delete().eq("id", comment_id).execute()
        except Exception as e:
            logger.error("Comment delete error for %s: %s", comment_id, e)
            raise
        return bool(res.data)

    def _map_to_entity(self, data: dict) -> Comment:
        return Comment(
            id=data["id"],
            content=data["content"],
            owner=data["owner"],
            video=data["video"],
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at"))
        )
