"""Subject lookup domain service."""

from uuid import UUID

import logfire

from askabout.domain.error import NotFoundError
from askabout.domain.repository import CommentRepository, QuestionRepository
from askabout.domain.value import CommentId, QuestionId, Subject, SubjectType

from .base import Service


class SubjectService(Service):
    """Resolves votable items to their author and topic."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize subject service.

        Args:
            question_repository: Question repository
            comment_repository: Comment repository
        """
        self.question_repository = question_repository
        self.comment_repository = comment_repository

    async def resolve(self, subject_type: SubjectType, subject_id: UUID) -> Subject:
        """Resolve a question or comment.

        A comment takes the topic of the question it was posted under.

        Args:
            subject_type: Type of subject
            subject_id: Subject ID

        Returns:
            Resolved subject

        Raises:
            NotFoundError: If the subject (or a comment's question) is missing
        """
        with logfire.span(
            "subject_service.resolve",
            subject_type=subject_type.value,
            subject_id=str(subject_id),
        ):
            if subject_type == SubjectType.QUESTION:
                question = await self.question_repository.find_by_id(
                    QuestionId(subject_id)
                )
                if not question:
                    logfire.warn("Question not found", question_id=str(subject_id))
                    raise NotFoundError("Question", str(subject_id))
                return Subject(
                    subject_type=subject_type,
                    subject_id=subject_id,
                    topic_id=question.topic_id,
                    author_id=question.author_id,
                )

            comment = await self.comment_repository.find_by_id(CommentId(subject_id))
            if not comment:
                logfire.warn("Comment not found", comment_id=str(subject_id))
                raise NotFoundError("Comment", str(subject_id))

            question = await self.question_repository.find_by_id(comment.question_id)
            if not question:
                logfire.warn(
                    "Question of comment not found",
                    comment_id=str(subject_id),
                    question_id=str(comment.question_id),
                )
                raise NotFoundError("Question", str(comment.question_id))

            return Subject(
                subject_type=subject_type,
                subject_id=subject_id,
                topic_id=question.topic_id,
                author_id=comment.author_id,
            )
