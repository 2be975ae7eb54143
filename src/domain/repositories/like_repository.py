from abc import ABC, abstractmethod
from src.domain.entities.like import Like

class LikeRepository(ABC):
    @abstractmethod
    def list_by_comment_ids(self, comment_ids: list[str]) -> list[Like]:
        pass

    @abstractmethod
    def delete_by_comment(self, comment_id: str) -> int:
        pass
