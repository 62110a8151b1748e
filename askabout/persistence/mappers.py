"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from askabout.domain.model import Comment, Question, Rating, Topic, User, Vote
from askabout.domain.value import (
    CommentId,
    Handle,
    QuestionId,
    RatingId,
    SubjectType,
    TopicId,
    TopicName,
    UserId,
    VoteId,
    VoteState,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "handle": user.handle.root,
        "created_at": user.created_at,
    }


def row_to_topic(row: Dict[str, Any]) -> Topic:
    """Convert database row to Topic domain model."""
    return Topic(
        id=TopicId(_uuid(row["id"])),
        name=TopicName(row["name"]),
        created_at=row["created_at"],
    )


def topic_to_dict(topic: Topic) -> Dict[str, Any]:
    """Convert Topic domain model to database dict."""
    return {
        "id": topic.id,
        "name": topic.name.root,
        "created_at": topic.created_at,
    }


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model."""
    return Question(
        id=QuestionId(_uuid(row["id"])),
        topic_id=TopicId(_uuid(row["topic_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        text=row.get("text"),
        attachment=row.get("attachment"),
        created_at=row["created_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict."""
    return question.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        text=row["text"],
        attachment=row.get("attachment"),
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        subject_type=SubjectType(row["subject_type"]),
        subject_id=_uuid(row["subject_id"]),
        state=VoteState(row["state"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Enums are stored by value.
    """
    return {
        "id": vote.id,
        "user_id": vote.user_id,
        "subject_type": vote.subject_type.value,
        "subject_id": vote.subject_id,
        "state": vote.state.value,
        "created_at": vote.created_at,
        "updated_at": vote.updated_at,
    }


def row_to_rating(row: Dict[str, Any]) -> Rating:
    """Convert database row to Rating domain model."""
    return Rating(
        id=RatingId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        topic_id=TopicId(_uuid(row["topic_id"])),
        amount=row["amount"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def rating_to_dict(rating: Rating) -> Dict[str, Any]:
    """Convert Rating domain model to database dict."""
    return rating.model_dump()
