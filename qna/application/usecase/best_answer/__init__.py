"""Best-answer use cases."""

from .mark_best_answer import (
    MarkBestAnswerRequest,
    MarkBestAnswerResponse,
    MarkBestAnswerUseCase,
)

__all__ = [
    "MarkBestAnswerRequest",
    "MarkBestAnswerResponse",
    "MarkBestAnswerUseCase",
]
