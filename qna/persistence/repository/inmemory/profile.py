"""In-memory profile repository for testing."""

from typing import Optional

from qna.domain.model.profile import Profile
from qna.domain.repository.profile import ProfileRepository
from qna.domain.value import QuestionId, UserId, Username

from .answer import InMemoryAnswerRepository
from .message import InMemoryMessageRepository
from .question import InMemoryQuestionRepository
from .vote import InMemoryVoteRepository


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing.

    When given the sibling repositories, ``delete`` removes the user's
    questions, answers, votes and messages the way the ``ON DELETE
    CASCADE`` foreign keys do in Postgres. Votes on removed content are
    left in place, as they are there.
    """

    def __init__(
        self,
        questions: InMemoryQuestionRepository | None = None,
        answers: InMemoryAnswerRepository | None = None,
        votes: InMemoryVoteRepository | None = None,
        messages: InMemoryMessageRepository | None = None,
    ) -> None:
        self._profiles: dict[UserId, Profile] = {}
        self._questions = questions
        self._answers = answers
        self._votes = votes
        self._messages = messages

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by ID."""
        return self._profiles.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username."""
        for profile in self._profiles.values():
            if profile.username == username:
                return profile
        return None

    async def find_all(self, limit: int = 100, offset: int = 0) -> list[Profile]:
        """Find profiles ordered by reputation, highest first."""
        profiles = sorted(self._profiles.values(), key=lambda p: p.username.root)
        profiles.sort(key=lambda p: p.reputation, reverse=True)
        return profiles[offset : offset + limit]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile."""
        self._profiles[profile.id] = profile
        return profile

    async def delete(self, user_id: UserId) -> bool:
        """Delete a profile and everything that references it."""
        if self._profiles.pop(user_id, None) is None:
            return False

        removed_questions: set[QuestionId] = set()
        if self._questions is not None:
            removed_questions = self._questions.remove_by_author(user_id)
        if self._answers is not None:
            self._answers.remove_by_author(user_id)
            self._answers.remove_by_questions(removed_questions)
        if self._votes is not None:
            self._votes.remove_by_voter(user_id)
        if self._messages is not None:
            self._messages.remove_by_user(user_id)
        return True
