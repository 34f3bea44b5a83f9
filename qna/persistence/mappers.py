"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from qna.domain.model import Answer, Message, Profile, Question, Tag, Vote
from qna.domain.value import (
    AnswerId,
    MessageId,
    QuestionId,
    TagId,
    TagName,
    UserId,
    Username,
    VotableType,
    VoteDirection,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        full_name=row.get("full_name"),
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio"),
        reputation=row["reputation"],
        is_admin=row["is_admin"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    data = profile.model_dump()
    data["username"] = profile.username.root
    return data


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        description=row.get("description"),
        question_count=row["question_count"],
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    data = tag.model_dump()
    data["name"] = tag.name.root
    return data


def row_to_question(row: Dict[str, Any], tag_names: list[str]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict
        tag_names: Names of the question's tags (from question_tags)

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        tag_names=[TagName(name) for name in sorted(tag_names)],
        votes=row["votes"],
        answer_count=row["answer_count"],
        views=row["views"],
        has_best_answer=row["has_best_answer"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Tags live in the junction table and are excluded.
    """
    return question.model_dump(exclude={"tag_names"})


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        votes=row["votes"],
        is_best_answer=row["is_best_answer"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        voter_id=UserId(_uuid(row["voter_id"])),
        target_type=VotableType(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "id": vote.id,
        "voter_id": vote.voter_id,
        "target_type": vote.target_type.value,
        "target_id": vote.target_id,
        "direction": int(vote.direction),
        "created_at": vote.created_at,
        "updated_at": vote.updated_at,
    }


def row_to_message(row: Dict[str, Any]) -> Message:
    """Convert database row to Message domain model."""
    return Message(
        id=MessageId(_uuid(row["id"])),
        sender_id=UserId(_uuid(row["sender_id"])),
        receiver_id=UserId(_uuid(row["receiver_id"])),
        content=row["content"],
        created_at=row["created_at"],
    )


def message_to_dict(message: Message) -> Dict[str, Any]:
    """Convert Message domain model to database dict."""
    return message.model_dump()
