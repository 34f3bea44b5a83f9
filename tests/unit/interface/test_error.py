"""Unit tests for domain error to HTTP status mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from qna.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    PartialMutationError,
    StoreFailureError,
    UnauthenticatedError,
    ValidationError,
)
from qna.interface.error import (
    STORE_UNAVAILABLE_DETAIL,
    register_error_handlers,
    status_for,
)


@pytest.mark.parametrize(
    "error, expected",
    [
        (UnauthenticatedError("vote"), 401),
        (NotAuthorizedError("edit", "question", "q1", "u1"), 403),
        (NotFoundError("Question", "q1"), 404),
        (ValidationError("Title too short"), 400),
        (BusinessRuleViolationError("Username bob is already taken"), 400),
        (StoreFailureError("vote_repository.save"), 503),
        (PartialMutationError("cast_vote", ["vote.applied"], "question.votes"), 503),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected


def _app_raising(error: Exception) -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    async def boom():
        raise error

    return app


def test_domain_error_detail_is_message():
    client = TestClient(_app_raising(NotFoundError("Question", "q1")))

    response = client.get("/boom")

    assert response.status_code == 404
    assert response.json() == {"detail": "Question not found: q1"}


def test_store_failure_detail_is_generic():
    """Store internals never leak to clients."""
    client = TestClient(
        _app_raising(
            PartialMutationError("post_answer", ["answer.insert"], "question.answer_count")
        )
    )

    response = client.get("/boom")

    assert response.status_code == 503
    assert response.json() == {"detail": STORE_UNAVAILABLE_DETAIL}
