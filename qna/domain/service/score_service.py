"""Score domain service.

Keeps the stored vote totals and answer counts in step with vote and
answer records. Vote deltas are applied with store-level increments;
``reconcile_question`` re-derives every counter of a question from the
underlying records and repairs whatever drifted.
"""

from typing import Iterable
from uuid import UUID

import logfire

from qna.domain.error import NotFoundError
from qna.domain.model.question import Question
from qna.domain.model.score import CounterDrift, ReconcileReport
from qna.domain.repository import AnswerRepository, QuestionRepository, VoteRepository
from qna.domain.value import AnswerId, QuestionId, UserId, VotableType

from .base import Service


class ScoreService(Service):
    """Domain service for denormalized score counters."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize score service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            vote_repository: Vote repository
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.vote_repository = vote_repository

    async def apply_vote(
        self, target_type: VotableType, target_id: UUID, delta: int
    ) -> None:
        """Move a target's stored vote total by a cast vote's delta.

        Args:
            target_type: Question or answer
            target_id: ID of the target
            delta: Signed delta from the vote ledger
        """
        if delta == 0:
            return

        with logfire.span(
            "score_service.apply_vote",
            target_type=target_type.value,
            target_id=str(target_id),
            delta=delta,
        ):
            if target_type == VotableType.QUESTION:
                await self.question_repository.adjust_votes(QuestionId(target_id), delta)
            else:  # VotableType.ANSWER
                await self.answer_repository.adjust_votes(AnswerId(target_id), delta)

    async def reconcile_question(self, question_id: QuestionId) -> ReconcileReport:
        """Recompute a question's counters from its records.

        Re-derives the question's vote total, every answer's vote total,
        the answer count and the has_best_answer flag, writing back only
        the values that differ.

        Args:
            question_id: Question to reconcile

        Returns:
            Report of the authoritative values and any drift found

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "score_service.reconcile_question", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                raise NotFoundError("Question", str(question_id))
            return await self._reconcile(question)

    async def reconcile_questions(
        self, question_ids: Iterable[QuestionId]
    ) -> list[ReconcileReport]:
        """Reconcile several questions, skipping any that no longer exist.

        Used after deletes whose cascades may have removed some of them.
        """
        reports = []
        for question_id in question_ids:
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.info(
                    "Skipping reconcile of removed question",
                    question_id=str(question_id),
                )
                continue
            reports.append(await self._reconcile(question))
        return reports

    async def questions_affected_by_user(self, user_id: UserId) -> set[QuestionId]:
        """Questions whose counters depend on a user's answers or votes.

        Covers questions the user answered, questions they voted on and
        the questions of answers they voted on.
        """
        with logfire.span(
            "score_service.questions_affected_by_user", user_id=str(user_id)
        ):
            affected = {
                answer.question_id
                for answer in await self.answer_repository.find_by_author(user_id)
            }
            for vote in await self.vote_repository.find_by_voter(user_id):
                if vote.target_type == VotableType.QUESTION:
                    affected.add(QuestionId(vote.target_id))
                    continue
                answer = await self.answer_repository.find_by_id(
                    AnswerId(vote.target_id)
                )
                if answer is not None:
                    affected.add(answer.question_id)
            return affected

    async def _reconcile(self, question: Question) -> ReconcileReport:
        question_id = question.id
        with logfire.span("score_service.reconcile", question_id=str(question_id)):
            answers = await self.answer_repository.find_by_question(question_id)
            question_votes = await self.vote_repository.sum_by_target(
                VotableType.QUESTION, question_id
            )
            answer_votes = await self.vote_repository.sum_by_targets(
                VotableType.ANSWER, [answer.id for answer in answers]
            )
            answer_count = len(answers)
            has_best = any(answer.is_best_answer for answer in answers)

            drift: list[CounterDrift] = []

            if question.votes != question_votes:
                drift.append(
                    CounterDrift(
                        target_type=VotableType.QUESTION,
                        target_id=question_id,
                        counter="votes",
                        stored=question.votes,
                        actual=question_votes,
                    )
                )
                await self.question_repository.set_votes(question_id, question_votes)

            if question.answer_count != answer_count:
                drift.append(
                    CounterDrift(
                        target_type=VotableType.QUESTION,
                        target_id=question_id,
                        counter="answer_count",
                        stored=question.answer_count,
                        actual=answer_count,
                    )
                )
                await self.question_repository.set_answer_count(
                    question_id, answer_count
                )

            if question.has_best_answer != has_best:
                drift.append(
                    CounterDrift(
                        target_type=VotableType.QUESTION,
                        target_id=question_id,
                        counter="has_best_answer",
                        stored=int(question.has_best_answer),
                        actual=int(has_best),
                    )
                )
                await self.question_repository.set_has_best_answer(
                    question_id, has_best
                )

            for answer in answers:
                actual = answer_votes.get(answer.id, 0)
                if answer.votes != actual:
                    drift.append(
                        CounterDrift(
                            target_type=VotableType.ANSWER,
                            target_id=answer.id,
                            counter="votes",
                            stored=answer.votes,
                            actual=actual,
                        )
                    )
                    await self.answer_repository.set_votes(answer.id, actual)

            if drift:
                logfire.warn(
                    "Question counters drifted and were repaired",
                    question_id=str(question_id),
                    drift=[f"{d.counter}:{d.stored}->{d.actual}" for d in drift],
                )
            else:
                logfire.info("Question counters consistent", question_id=str(question_id))

            return ReconcileReport(
                question_id=question_id,
                question_votes=question_votes,
                answer_count=answer_count,
                answer_votes={answer.id: answer_votes.get(answer.id, 0) for answer in answers},
                drift=drift,
            )
