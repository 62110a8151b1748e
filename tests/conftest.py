"""Test configuration and fixtures."""

import os
from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

from askabout.domain.model import Comment, Question, Topic, User
from askabout.domain.value import (
    CommentId,
    Handle,
    QuestionId,
    TopicId,
    TopicName,
    UserId,
)
from tests.di import InMemoryStore

# HS256 keys shorter than 32 bytes trigger InsecureKeyLengthWarning
os.environ.setdefault(
    "AUTH__JWT_SECRET", "askabout-test-secret-0123456789abcdef"
)


@dataclass
class Forum:
    """A seeded topic with one question, one comment and their authors."""

    topic: Topic
    asker: User
    commenter: User
    voter: User
    other_voter: User
    question: Question
    comment: Comment


def make_user(handle: str) -> User:
    """Build a user with a fresh ID."""
    return User(id=UserId(uuid4()), handle=Handle(handle), created_at=datetime.now())


async def seed_forum(store: InMemoryStore, topic_name: str = "Python") -> Forum:
    """Save a topic, a question, a comment on it and four users to the store.

    The question is asked by ``asker``; the comment is written by
    ``commenter``. ``voter`` and ``other_voter`` have no content.
    """
    topic = Topic(id=TopicId(uuid4()), name=TopicName(topic_name))
    asker = make_user("asker")
    commenter = make_user("commenter")
    voter = make_user("voter")
    other_voter = make_user("other-voter")

    question = Question(
        id=QuestionId(uuid4()),
        topic_id=topic.id,
        author_id=asker.id,
        title="How do I reverse a list?",
        text="Without copying it, if possible.",
    )
    comment = Comment(
        id=CommentId(uuid4()),
        question_id=question.id,
        author_id=commenter.id,
        text="Use list.reverse().",
    )

    await store.topics.save(topic)
    for user in (asker, commenter, voter, other_voter):
        await store.users.save(user)
    await store.questions.save(question)
    await store.comments.save(comment)

    return Forum(
        topic=topic,
        asker=asker,
        commenter=commenter,
        voter=voter,
        other_voter=other_voter,
        question=question,
        comment=comment,
    )
