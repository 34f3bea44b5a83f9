"""Best answer domain service.

A question is either without a best answer or has exactly one. Only the
question's author may choose it, and a choice can only be replaced by
choosing another answer; there is no way back to "no best answer".
"""

import logfire

from qna.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    PartialMutationError,
    StoreFailureError,
    UnauthenticatedError,
)
from qna.domain.model.question import Question
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.value import AnswerId, QuestionId, UserId

from .base import Service


class BestAnswerService(Service):
    """Domain service for choosing a question's best answer."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize best answer service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def mark_best(
        self,
        question_id: QuestionId,
        answer_id: AnswerId,
        caller_id: UserId | None,
    ) -> Question:
        """Mark an answer as the best answer to its question.

        Steps once the caller is verified as the author:
        1. Raise the question's has_best_answer flag
        2. Flag the chosen answer and clear every sibling in one write

        Args:
            question_id: Question ID
            answer_id: Answer to mark
            caller_id: Authenticated caller, None if anonymous

        Returns:
            The question with has_best_answer set

        Raises:
            UnauthenticatedError: If there is no caller (no store access)
            NotFoundError: If the question or answer does not exist, or the
                answer belongs to another question
            NotAuthorizedError: If the caller is not the question's author
            PartialMutationError: If step 2 fails after step 1 succeeded
        """
        if caller_id is None:
            raise UnauthenticatedError("mark a best answer")

        with logfire.span(
            "best_answer_service.mark_best",
            question_id=str(question_id),
            answer_id=str(answer_id),
            caller_id=str(caller_id),
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                raise NotFoundError("Question", str(question_id))

            if question.author_id != caller_id:
                logfire.warn(
                    "Best answer attempt by non-author",
                    question_id=str(question_id),
                    caller_id=str(caller_id),
                )
                raise NotAuthorizedError(
                    "mark the best answer of", "question", str(question_id), str(caller_id)
                )

            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer or answer.question_id != question_id:
                raise NotFoundError("Answer", str(answer_id))

            await self.question_repository.set_has_best_answer(question_id, True)

            try:
                flagged = await self.answer_repository.select_best(
                    question_id, answer_id
                )
            except StoreFailureError as e:
                logfire.error(
                    "Best answer flag raised but answer selection failed",
                    question_id=str(question_id),
                    answer_id=str(answer_id),
                    error=str(e),
                )
                raise PartialMutationError(
                    "mark_best_answer",
                    completed=["question.has_best_answer"],
                    failed="answer.is_best_answer",
                ) from e

            if flagged != 1:
                # Answer deleted or moved between the lookup and the write
                logfire.error(
                    "Best answer selection flagged no answer",
                    question_id=str(question_id),
                    answer_id=str(answer_id),
                    flagged=flagged,
                )
                raise PartialMutationError(
                    "mark_best_answer",
                    completed=["question.has_best_answer"],
                    failed="answer.is_best_answer",
                )

            logfire.info(
                "Best answer marked",
                question_id=str(question_id),
                answer_id=str(answer_id),
                replaced_previous=question.has_best_answer,
            )
            return question.model_copy(update={"has_best_answer": True})
