"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from askabout.domain.model.comment import Comment
from askabout.domain.value import CommentId


class CommentRepository(ABC):
    """Comments as votable subjects.

    Creating and editing comments belongs to the Q&A service; ``save`` is
    here for seeding and tests.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Return the comment, or None if it does not exist (or was deleted)."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        pass
