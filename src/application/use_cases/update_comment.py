from src.domain.entities.comment import Comment
from src.domain.errors import InternalError, NotFoundError, PermissionDeniedError, ValidationError
from src.domain.policies import is_owner
from src.domain.repositories.comment_repository import CommentRepository
from src.domain.validators import is_filled, is_valid_id

class UpdateCommentUseCase:
    def __init__(self, comment_repo: CommentRepository):
        self.comment_repo = comment_repo

    def execute(self, comment_id: str, content: str, user_id: str) -> Comment:
        """
        Replaces the comment text. Owner and video never change.
        """
        if not is_filled(content):
            raise ValidationError("content is required to update")

        # 1. Security: Verify ownership
        comment = self.comment_repo.get_by_id(comment_id) if is_valid_id(comment_id) else None
        if not comment:
            raise NotFoundError("Comment not found")

        if not is_owner(comment, user_id):
            raise PermissionDeniedError("Only the comment owner can edit their comment")

        # 2. Update via Repository
        updated_comment = self.comment_repo.update_content(comment_id, content)
        if not updated_comment:
            raise InternalError("Failed to edit comment please try again")
        return updated_comment
