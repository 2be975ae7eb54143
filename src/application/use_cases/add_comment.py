from datetime import datetime, timezone
from src.domain.entities.comment import Comment
from src.domain.errors import InternalError, NotFoundError, ValidationError
from src.domain.repositories.comment_repository import CommentRepository
from src.domain.validators import is_filled, is_valid_id
from src.domain.repositories.video_repository import VideoRepository

class AddCommentUseCase:
    def __init__(self, comment_repo: CommentRepository, video_repo: VideoRepository):
        self.comment_repo = comment_repo
        self.video_repo = video_repo

    def execute(self, video_id: str, content: str, owner_id: str) -> Comment:
        if not is_filled(content):
            raise ValidationError("content can not be empty")

        if not is_valid_id(video_id) or not self.video_repo.get_by_id(video_id):
            raise NotFoundError("Video not found")

        now = datetime.now(timezone.utc)
        comment = self.comment_repo.create(Comment(
            id="",  # Let DB handle it
            content=content,
            owner=owner_id,
            video=video_id,
            created_at=now,
            updated_at=now
        ))

        if not comment:
            raise InternalError("Failed to add comment please try again")
        return comment
