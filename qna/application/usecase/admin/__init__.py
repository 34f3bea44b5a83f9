"""Admin moderation use cases."""

from .moderate_messages import (
    AdminListMessagesRequest,
    AdminListMessagesResponse,
    AdminListMessagesUseCase,
    DeleteMessageRequest,
    DeleteMessageUseCase,
)
from .moderate_users import (
    AdminListUsersRequest,
    AdminListUsersUseCase,
    DeleteUserRequest,
    DeleteUserUseCase,
    GrantAdminRequest,
    GrantAdminResponse,
    GrantAdminUseCase,
)
from .reconcile_question import (
    ReconcileQuestionRequest,
    ReconcileQuestionResponse,
    ReconcileQuestionUseCase,
)

__all__ = [
    "AdminListMessagesRequest",
    "AdminListMessagesResponse",
    "AdminListMessagesUseCase",
    "AdminListUsersRequest",
    "AdminListUsersUseCase",
    "DeleteMessageRequest",
    "DeleteMessageUseCase",
    "DeleteUserRequest",
    "DeleteUserUseCase",
    "GrantAdminRequest",
    "GrantAdminResponse",
    "GrantAdminUseCase",
    "ReconcileQuestionRequest",
    "ReconcileQuestionResponse",
    "ReconcileQuestionUseCase",
]
