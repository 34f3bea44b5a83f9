"""Vote routes."""

from typing import Literal
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from qna.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetMyVoteRequest,
    GetMyVoteResponse,
    GetMyVoteUseCase,
)
from qna.domain.service import JWTService
from qna.domain.value import VotableType

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting.

    Repeating the caller's current direction retracts the vote.
    """

    direction: Literal[1, -1]
    # Score the client is showing; echoed back projected by the vote's delta
    displayed_score: int | None = None


async def _cast(
    use_case: CastVoteUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
    target_type: VotableType,
    target_id: UUID,
    request: CastVoteAPIRequest,
) -> CastVoteResponse:
    voter_id = jwt_service.get_user_id_from_token(auth_token)
    return await use_case.execute(
        CastVoteRequest(
            target_type=target_type,
            target_id=str(target_id),
            direction=request.direction,
            voter_id=voter_id,
            displayed_score=request.displayed_score,
        )
    )


async def _my_vote(
    use_case: GetMyVoteUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
    target_type: VotableType,
    target_id: UUID,
) -> GetMyVoteResponse:
    voter_id = jwt_service.get_user_id_from_token(auth_token)
    return await use_case.execute(
        GetMyVoteRequest(
            target_type=target_type, target_id=str(target_id), voter_id=voter_id
        )
    )


@router.post("/questions/{question_id}/vote", response_model=CastVoteResponse)
async def vote_on_question(
    question_id: UUID,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a question.

    Requires authentication.

    Returns:
        The ledger outcome (created, removed or changed) and the score delta
    """
    return await _cast(
        cast_vote_use_case,
        jwt_service,
        auth_token,
        VotableType.QUESTION,
        question_id,
        request,
    )


@router.get("/questions/{question_id}/vote", response_model=GetMyVoteResponse)
async def my_vote_on_question(
    question_id: UUID,
    get_my_vote_use_case: FromDishka[GetMyVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetMyVoteResponse:
    """Get the caller's vote on a question (0 when anonymous or not voted)."""
    return await _my_vote(
        get_my_vote_use_case, jwt_service, auth_token, VotableType.QUESTION, question_id
    )


@router.post("/answers/{answer_id}/vote", response_model=CastVoteResponse)
async def vote_on_answer(
    answer_id: UUID,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on an answer.

    Requires authentication.
    """
    return await _cast(
        cast_vote_use_case,
        jwt_service,
        auth_token,
        VotableType.ANSWER,
        answer_id,
        request,
    )


@router.get("/answers/{answer_id}/vote", response_model=GetMyVoteResponse)
async def my_vote_on_answer(
    answer_id: UUID,
    get_my_vote_use_case: FromDishka[GetMyVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetMyVoteResponse:
    """Get the caller's vote on an answer (0 when anonymous or not voted)."""
    return await _my_vote(
        get_my_vote_use_case, jwt_service, auth_token, VotableType.ANSWER, answer_id
    )
