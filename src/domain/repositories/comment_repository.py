from abc import ABC, abstractmethod
from typing import Optional
from src.domain.entities.comment import Comment

class CommentRepository(ABC):
    @abstractmethod
    def get_by_id(self, comment_id: str) -> Optional[Comment]:
        pass

    @abstractmethod
    def page_by_video(self, video_id: str, offset: int, limit: int) -> tuple[list[Comment], int]:
        """
        Returns one page of a video's comments, newest first, together
        with the total number of comments on the video.
        """
        pass

    @abstractmethod
    def create(self, comment: Comment) -> Optional[Comment]:
        pass

    @abstractmethod
    def update_content(self, comment_id: str, content: str) -> Optional[Comment]:
        pass

    @abstractmethod
    def delete(self, comment_id: str) -> bool:
        pass
