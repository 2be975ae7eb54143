from typing import Optional
from supabase import Client
from src.config import USERS_TABLE
from src.domain.entities.user import User
from src.domain.repositories.user_repository import UserRepository
from src.infrastructure.supabase_client import get_supabase
from src.logging_config import get_logger

logger = get_logger(__name__)

class SupabaseUserRepository(UserRepository):
    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    def get_by_ids(self, user_ids: list[str]) -> list[User]:
        if not user_ids:
            return []
        try:
            res = (
                self.client
                .table(USERS_TABLE)
                .select("id, username, full_name, avatar_url")
                .in_("id", list(user_ids))
                .execute()
            )
        except Exception as e:
            logger.error("User batch fetch error: %s", e)
            raise

        return [
            User(
                id=item["id"],
                username=item["username"],
                full_name=item.get("full_name") or "",
                avatar_url=item.get("avatar_url")
            )
            for item in res.data or []
        ]
