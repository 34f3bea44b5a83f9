"""Test configuration and shared factories."""

import os
from datetime import datetime, timedelta
from uuid import uuid4

# Must be set before any Settings() is built
os.environ.setdefault("ENVIRONMENT", "test")

from qna.domain.model import Answer, Profile, Question, Tag  # noqa: E402
from qna.domain.value import (  # noqa: E402
    AnswerId,
    QuestionId,
    TagId,
    TagName,
    UserId,
    Username,
)


def make_profile(
    username: str = "alice",
    user_id: UserId | None = None,
    is_admin: bool = False,
    reputation: int = 0,
) -> Profile:
    """Build a profile with sensible defaults."""
    return Profile(
        id=user_id or UserId(uuid4()),
        username=Username(username),
        reputation=reputation,
        is_admin=is_admin,
    )


def make_tag(name: str = "python", question_count: int = 0) -> Tag:
    """Build a tag with sensible defaults."""
    return Tag(
        id=TagId(uuid4()),
        name=TagName(name),
        description=f"Questions about {name}",
        question_count=question_count,
    )


def make_question(
    author_id: UserId | None = None,
    title: str = "How do I read a file line by line?",
    content: str = "I have a large text file and want to process it one line at a time.",
    tag_names: list[str] | None = None,
    votes: int = 0,
    answer_count: int = 0,
    created_at: datetime | None = None,
) -> Question:
    """Build a question with sensible defaults."""
    created = created_at or datetime.now()
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        content=content,
        author_id=author_id or UserId(uuid4()),
        tag_names=[TagName(n) for n in (tag_names or ["python"])],
        votes=votes,
        answer_count=answer_count,
        created_at=created,
        updated_at=created,
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId | None = None,
    content: str = "Iterate over the file object, it yields lines lazily.",
    votes: int = 0,
    is_best_answer: bool = False,
    age: timedelta = timedelta(0),
) -> Answer:
    """Build an answer with sensible defaults.

    ``age`` pushes created_at into the past, for ordering tests.
    """
    created = datetime.now() - age
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=author_id or UserId(uuid4()),
        content=content,
        votes=votes,
        is_best_answer=is_best_answer,
        created_at=created,
        updated_at=created,
    )
