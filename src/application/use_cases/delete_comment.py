from src.domain.errors import InternalError, NotFoundError, PermissionDeniedError
from src.domain.policies import is_owner
from src.domain.repositories.comment_repository import CommentRepository
from src.domain.repositories.like_repository import LikeRepository
from src.domain.validators import is_valid_id
from src.logging_config import get_logger

logger = get_logger(__name__)

class DeleteCommentUseCase:
    def __init__(self, comment_repo: CommentRepository, like_repo: LikeRepository):
        self.comment_repo = comment_repo
        self.like_repo = like_repo

    def execute(self, comment_id: str, user_id: str) -> dict[str, str]:
        """
        Deletes the comment, then the likes pointing at it.
        The two deletes are not atomic: when the like cleanup fails the
        comment stays deleted and the orphaned likes are left for a later sweep.
        """
        comment = self.comment_repo.get_by_id(comment_id) if is_valid_id(comment_id) else None
        if not comment:
            raise NotFoundError("Comment not found")

        if not is_owner(comment, user_id):
            raise PermissionDeniedError("Only the comment owner can delete their comment")

        if not self.comment_repo.delete(comment_id):
            raise InternalError("Failed to delete comment please try again")

        try:
            removed = self.like_repo.delete_by_comment(comment_id)
            logger.info("Deleted comment %s and %d like(s)", comment_id, removed)
        except Exception:
            logger.exception("Like cleanup failed for deleted comment %s", comment_id)

        return {"comment_id": comment_id}
