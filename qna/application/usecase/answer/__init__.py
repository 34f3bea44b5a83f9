"""Answer use cases."""

from .post_answer import (
    AnswerItem,
    PostAnswerRequest,
    PostAnswerResponse,
    PostAnswerUseCase,
)

__all__ = [
    "AnswerItem",
    "PostAnswerRequest",
    "PostAnswerResponse",
    "PostAnswerUseCase",
]
