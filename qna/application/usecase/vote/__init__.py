"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_my_vote import GetMyVoteRequest, GetMyVoteResponse, GetMyVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetMyVoteRequest",
    "GetMyVoteResponse",
    "GetMyVoteUseCase",
]
