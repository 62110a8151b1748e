"""In-memory question repository for testing."""

from typing import Optional

from askabout.domain.model.question import Question
from askabout.domain.repository.question import QuestionRepository
from askabout.domain.value import QuestionId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._questions[question.id] = question
        return question
