"""Dict-backed comment repository."""

from typing import Optional

from askabout.domain.model.comment import Comment
from askabout.domain.repository.comment import CommentRepository
from askabout.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    def __init__(self) -> None:
        self._by_id: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._by_id.get(comment_id)

    async def save(self, comment: Comment) -> Comment:
        self._by_id[comment.id] = comment
        return comment
