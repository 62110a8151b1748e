"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from askabout.domain.model.question import Question
from askabout.domain.value import QuestionId


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Question authoring lives outside the vote engine; the engine only
    reads questions to resolve their author and topic.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question."""
        pass
