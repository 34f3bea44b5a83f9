"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from qna.application.usecase.answer import (
    PostAnswerRequest,
    PostAnswerResponse,
    PostAnswerUseCase,
)
from qna.application.usecase.best_answer import (
    MarkBestAnswerRequest,
    MarkBestAnswerResponse,
    MarkBestAnswerUseCase,
)
from qna.domain.service import JWTService

router = APIRouter(tags=["answers"], route_class=DishkaRoute)


class PostAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str = Field(min_length=1, max_length=30000)


class MarkBestAnswerAPIRequest(BaseModel):
    """API request for choosing the accepted answer."""

    answer_id: UUID


@router.post(
    "/questions/{question_id}/answers",
    response_model=PostAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_answer(
    question_id: UUID,
    request: PostAnswerAPIRequest,
    post_answer_use_case: FromDishka[PostAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostAnswerResponse:
    """Answer a question.

    Requires authentication. The response carries the question's answer
    count after the increment.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return await post_answer_use_case.execute(
        PostAnswerRequest(
            question_id=str(question_id), content=request.content, author_id=user_id
        )
    )


@router.post(
    "/questions/{question_id}/best-answer", response_model=MarkBestAnswerResponse
)
async def mark_best_answer(
    question_id: UUID,
    request: MarkBestAnswerAPIRequest,
    mark_best_answer_use_case: FromDishka[MarkBestAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkBestAnswerResponse:
    """Mark an answer as the question's best answer.

    Only the question's author may do this. Any previous best answer on
    the question is unmarked in the same write.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return await mark_best_answer_use_case.execute(
        MarkBestAnswerRequest(
            question_id=str(question_id),
            answer_id=str(request.answer_id),
            user_id=user_id,
        )
    )
