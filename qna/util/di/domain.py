"""Domain layer DI providers."""

from dishka import Scope, provide

from qna.config import AuthSettings, ContentSettings
from qna.domain.repository import (
    AnswerRepository,
    MessageRepository,
    ProfileRepository,
    QuestionRepository,
    TagRepository,
    VoteRepository,
)
from qna.domain.service import (
    AnswerService,
    BestAnswerService,
    JWTService,
    MessageService,
    ProfileService,
    QuestionService,
    ScoreService,
    TagService,
    VoteService,
)
from qna.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        content_settings: ContentSettings,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            content_settings=content_settings,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        content_settings: ContentSettings,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository, content_settings=content_settings
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> VoteService:
        """Provide vote domain service (the ledger)."""
        return VoteService(
            vote_repository=vote_repository,
            question_service=question_service,
            answer_service=answer_service,
        )

    @provide
    def get_score_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
    ) -> ScoreService:
        """Provide score domain service (stored counters)."""
        return ScoreService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            vote_repository=vote_repository,
        )

    @provide
    def get_best_answer_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> BestAnswerService:
        """Provide best-answer domain service."""
        return BestAnswerService(
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_profile_service(
        self,
        profile_repository: ProfileRepository,
        answer_repository: AnswerRepository,
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            profile_repository=profile_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_message_service(
        self,
        message_repository: MessageRepository,
        profile_repository: ProfileRepository,
        content_settings: ContentSettings,
    ) -> MessageService:
        """Provide message domain service."""
        return MessageService(
            message_repository=message_repository,
            profile_repository=profile_repository,
            content_settings=content_settings,
        )
