"""Store error translation for repository implementations."""

import functools
from typing import Awaitable, Callable, ParamSpec, TypeVar

import logfire
from sqlalchemy.exc import SQLAlchemyError

from qna.domain.error import StoreFailureError

P = ParamSpec("P")
R = TypeVar("R")


def store_operation(
    name: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Wrap a repository method in a span and translate driver errors.

    Any ``SQLAlchemyError`` raised inside the method (including asyncpg
    errors, which SQLAlchemy wraps) leaves as ``StoreFailureError`` so
    services never depend on the storage library.

    Args:
        name: Span and operation name, e.g. ``"vote_repository.save"``
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with logfire.span(name):
                try:
                    return await func(*args, **kwargs)
                except SQLAlchemyError as e:
                    logfire.error("Store operation failed", operation=name, error=str(e))
                    raise StoreFailureError(name, type(e).__name__) from e

        return wrapper

    return decorator
