"""Question routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from qna.application.usecase.question import (
    AskQuestionRequest,
    AskQuestionResponse,
    AskQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionResponse,
    UpdateQuestionUseCase,
)
from qna.domain.repository import AnswerSortOrder, QuestionSortOrder
from qna.domain.service import JWTService

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class AskQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=30000)
    tag_names: list[str] = Field(min_length=1, max_length=5)


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question. Omitted fields are unchanged."""

    title: str | None = Field(default=None, max_length=300)
    content: str | None = Field(default=None, max_length=30000)
    tag_names: list[str] | None = Field(default=None, min_length=1, max_length=5)


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    jwt_service: FromDishka[JWTService],
    sort: QuestionSortOrder = Query(default=QuestionSortOrder.NEWEST),
    tag: str | None = Query(default=None, description="Filter by tag name"),
    search: str | None = Query(default=None, max_length=200),
    unanswered: bool = Query(default=False),
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListQuestionsResponse:
    """List questions with sorting, filtering and pagination.

    When authenticated, each item carries the caller's vote direction.

    Examples:
        GET /questions?sort=votes&limit=20
        GET /questions?tag=python&unanswered=true
        GET /questions?search=asyncio
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return await list_questions_use_case.execute(
        ListQuestionsRequest(
            sort=sort,
            tag=tag,
            search=search,
            unanswered=unanswered,
            limit=limit,
            offset=offset,
            user_id=user_id,
        )
    )


@router.post("", response_model=AskQuestionResponse, status_code=status.HTTP_201_CREATED)
async def ask_question(
    request: AskQuestionAPIRequest,
    ask_question_use_case: FromDishka[AskQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AskQuestionResponse:
    """Ask a new question.

    Requires authentication. Tags must already exist.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return await ask_question_use_case.execute(
        AskQuestionRequest(
            title=request.title,
            content=request.content,
            tag_names=request.tag_names,
            author_id=user_id,
        )
    )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    answer_sort: AnswerSortOrder = Query(default=AnswerSortOrder.VOTES),
    auth_token: str | None = Cookie(default=None),
) -> GetQuestionResponse:
    """Get a question with its answers.

    Counts a view. The best answer is always listed first.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return await get_question_use_case.execute(
        GetQuestionRequest(
            question_id=str(question_id), answer_sort=answer_sort, user_id=user_id
        )
    )


@router.patch("/{question_id}", response_model=UpdateQuestionResponse)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateQuestionResponse:
    """Edit a question. Only the author can edit."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return await update_question_use_case.execute(
        UpdateQuestionRequest(
            question_id=str(question_id),
            user_id=user_id,
            title=request.title,
            content=request.content,
            tag_names=request.tag_names,
        )
    )
