from typing import Optional
from fastapi import APIRouter, Depends, Query

from src.api.auth import get_current_user, get_optional_user
from src.api.dependencies import get_comment_repo, get_like_repo, get_user_repo, get_video_repo
from src.api.responses import envelope
from src.api.v1.schemas.comment import CommentContentRequest
from src.application.use_cases.add_comment import AddCommentUseCase
from src.application.use_cases.delete_comment import DeleteCommentUseCase
from src.application.use_cases.list_video_comments import ListVideoCommentsUseCase
from src.application.use_cases.update_comment import UpdateCommentUseCase

router = APIRouter(tags=["Comments"])

# Wire up the dependencies
def list_comments_use_case(
    comments=Depends(get_comment_repo),
    videos=Depends(get_video_repo),
    users=Depends(get_user_repo),
    likes=Depends(get_like_repo)
):
    return ListVideoCommentsUseCase(comments, videos, users, likes)

def add_comment_use_case(comments=Depends(get_comment_repo), videos=Depends(get_video_repo)):
    return AddCommentUseCase(comments, videos)

def update_comment_use_case(comments=Depends(get_comment_repo)):
    return UpdateCommentUseCase(comments)

def delete_comment_use_case(comments=Depends(get_comment_repo), likes=Depends(get_like_repo)):
    return DeleteCommentUseCase(comments, likes)


@router.get("/videos/{video_id}/comments")
async def list_video_comments(
    video_id: str,
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    viewer=Depends(get_optional_user),
    use_case: ListVideoCommentsUseCase = Depends(list_comments_use_case)
):
    """
    Paginated comment feed for a video, newest first.
    """
    result = use_case.execute(video_id, page=page, limit=limit, viewer_id=viewer.id if viewer else None)
    return envelope(200, result, "Comments fetched successfully")

@router.post("/videos/{video_id}/comments")
async def add_comment(
    video_id: str,
    request: CommentContentRequest,
    user=Depends(get_current_user),
    use_case: AddCommentUseCase = Depends(add_comment_use_case)
):
    comment = use_case.execute(video_id, request.content, user.id)
    return envelope(201, comment, "Comment added successfully")

@router.patch("/comments/{comment_id}")
async def update_comment(
    comment_id: str,
    request: CommentContentRequest,
    user=Depends(get_current_user),
    use_case: UpdateCommentUseCase = Depends(update_comment_use_case)
):
    comment = use_case.execute(comment_id, request.content, user.id)
    return envelope(200, comment, "Comment edited successfully")

@router.delete("/comments/{comment_id}")
async def delete_comment(
    comment_id: str,
    user=Depends(get_current_user),
    use_case: DeleteCommentUseCase = Depends(delete_comment_use_case)
):
    result = use_case.execute(comment_id, user.id)
    return envelope(200, result, "Comment deleted successfully")
