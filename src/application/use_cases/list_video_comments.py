from typing import Any, Optional
from src.application.pagination import PageRequest, PagedResult
from src.application.projections import owner_summary
from src.domain.errors import NotFoundError
from src.domain.repositories.comment_repository import CommentRepository
from src.domain.repositories.like_repository import LikeRepository
from src.domain.repositories.user_repository import UserRepository
from src.domain.repositories.video_repository import VideoRepository
from src.domain.validators import is_valid_id

class ListVideoCommentsUseCase:
    def __init__(
        self,
        comment_repo: CommentRepository,
        video_repo: VideoRepository,
        user_repo: UserRepository,
        like_repo: LikeRepository
    ):
        self.comment_repo = comment_repo
        self.video_repo = video_repo
        self.user_repo = user_repo
        self.like_repo = like_repo

    def execute(self, video_id: str, page: Any = None, limit: Any = None, viewer_id: Optional[str] = None) -> PagedResult:
        """
        Builds one page of the comment feed for a video, newest first.
        Each comment carries its owner's public profile, the number of likes
        and whether the viewer is one of the likers.
        """
        if not is_valid_id(video_id) or not self.video_repo.get_by_id(video_id):
            raise NotFoundError("Video not found")

        request = PageRequest.parse(page, limit)

        # 1. Filter, sort and slice the page
        comments, total = self.comment_repo.page_by_video(video_id, request.offset, request.limit)

        # 2. Left-join owners and likes for the page only
        owner_ids = list(dict.fromkeys(c.owner for c in comments))
        owners = {u.id: u for u in self.user_repo.get_by_ids(owner_ids)}

        likers: dict[str, list[str]] = {c.id: [] for c in comments}
        for like in self.like_repo.list_by_comment_ids(list(likers)):
            likers.setdefault(like.comment, []).append(str(like.liked_by))

        # 3. Derive fields and project
        docs = [
            {
                "id": c.id,
                "content": c.content,
                "created_at": c.created_at,
                "likes_count": len(likers[c.id]),
                "is_liked": viewer_id is not None and str(viewer_id) in likers[c.id],
                "owner": owner_summary(owners.get(c.owner))
            }
            for c in comments
        ]
        return PagedResult.build(docs, total, request)
