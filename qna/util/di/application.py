"""Application layer DI providers."""

from dishka import Scope, provide

from qna.application.usecase.admin import (
    AdminListMessagesUseCase,
    AdminListUsersUseCase,
    DeleteMessageUseCase,
    DeleteUserUseCase,
    GrantAdminUseCase,
    ReconcileQuestionUseCase,
)
from qna.application.usecase.answer import PostAnswerUseCase
from qna.application.usecase.auth import GetCurrentUserUseCase
from qna.application.usecase.best_answer import MarkBestAnswerUseCase
from qna.application.usecase.message import GetConversationUseCase, SendMessageUseCase
from qna.application.usecase.profile import (
    GetProfileUseCase,
    ListProfilesUseCase,
    TopProfilesUseCase,
    UpdateProfileUseCase,
)
from qna.application.usecase.question import (
    AskQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from qna.application.usecase.tag import ListTagsUseCase
from qna.application.usecase.vote import CastVoteUseCase, GetMyVoteUseCase
from qna.domain.service import (
    AnswerService,
    BestAnswerService,
    MessageService,
    ProfileService,
    QuestionService,
    ScoreService,
    TagService,
    VoteService,
)
from qna.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_ask_question_use_case(
        self,
        question_service: QuestionService,
        tag_service: TagService,
        profile_service: ProfileService,
    ) -> AskQuestionUseCase:
        """Provide ask question use case."""
        return AskQuestionUseCase(
            question_service=question_service,
            tag_service=tag_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService, vote_service: VoteService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service, vote_service=vote_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_question_use_case(
        self, question_service: QuestionService, tag_service: TagService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            question_service=question_service, tag_service=tag_service
        )

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_post_answer_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        profile_service: ProfileService,
    ) -> PostAnswerUseCase:
        """Provide post answer use case."""
        return PostAnswerUseCase(
            answer_service=answer_service,
            question_service=question_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_best_answer_use_case(
        self, best_answer_service: BestAnswerService
    ) -> MarkBestAnswerUseCase:
        """Provide mark best answer use case."""
        return MarkBestAnswerUseCase(best_answer_service=best_answer_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        score_service: ScoreService,
        profile_service: ProfileService,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service,
            score_service=score_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_my_vote_use_case(self, vote_service: VoteService) -> GetMyVoteUseCase:
        """Provide get my vote use case."""
        return GetMyVoteUseCase(vote_service=vote_service)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(
        self, profile_service: ProfileService, question_service: QuestionService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(
            profile_service=profile_service, question_service=question_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_profiles_use_case(
        self, profile_service: ProfileService
    ) -> ListProfilesUseCase:
        """Provide list profiles use case."""
        return ListProfilesUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_top_profiles_use_case(
        self, profile_service: ProfileService
    ) -> TopProfilesUseCase:
        """Provide top profiles use case."""
        return TopProfilesUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, profile_service: ProfileService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(profile_service=profile_service)

    # Message use cases
    @provide(scope=Scope.REQUEST)
    def get_send_message_use_case(
        self, message_service: MessageService
    ) -> SendMessageUseCase:
        """Provide send message use case."""
        return SendMessageUseCase(message_service=message_service)

    @provide(scope=Scope.REQUEST)
    def get_get_conversation_use_case(
        self, message_service: MessageService
    ) -> GetConversationUseCase:
        """Provide get conversation use case."""
        return GetConversationUseCase(message_service=message_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_admin_list_users_use_case(
        self, profile_service: ProfileService
    ) -> AdminListUsersUseCase:
        """Provide admin list users use case."""
        return AdminListUsersUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_grant_admin_use_case(
        self, profile_service: ProfileService
    ) -> GrantAdminUseCase:
        """Provide grant admin use case."""
        return GrantAdminUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(
        self,
        profile_service: ProfileService,
        question_service: QuestionService,
        score_service: ScoreService,
        tag_service: TagService,
    ) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(
            profile_service=profile_service,
            question_service=question_service,
            score_service=score_service,
            tag_service=tag_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_admin_list_messages_use_case(
        self, profile_service: ProfileService, message_service: MessageService
    ) -> AdminListMessagesUseCase:
        """Provide admin list messages use case."""
        return AdminListMessagesUseCase(
            profile_service=profile_service, message_service=message_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_message_use_case(
        self, profile_service: ProfileService, message_service: MessageService
    ) -> DeleteMessageUseCase:
        """Provide delete message use case."""
        return DeleteMessageUseCase(
            profile_service=profile_service, message_service=message_service
        )

    @provide(scope=Scope.REQUEST)
    def get_reconcile_question_use_case(
        self, profile_service: ProfileService, score_service: ScoreService
    ) -> ReconcileQuestionUseCase:
        """Provide reconcile question use case."""
        return ReconcileQuestionUseCase(
            profile_service=profile_service, score_service=score_service
        )
