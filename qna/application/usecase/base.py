"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Orchestrates domain services for one request/response pair.

    Requests carry ids as strings; use cases convert them to typed ids
    and let domain errors propagate to the interface layer.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
