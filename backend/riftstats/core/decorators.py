"""
Repository layer decorators for common functionality.

This module provides decorators for error handling and logging around
database access.
"""

import functools
import inspect
from typing import Any, Awaitable, Callable, Dict, ParamSpec, TypeVar

import structlog
from sqlalchemy.exc import SQLAlchemyError

from .exceptions import DatabaseError

logger = structlog.get_logger(__name__)

# Type variables for generic decorator typing
P = ParamSpec("P")
R = TypeVar("R")


def repository_error_handler(
    repository_name: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """
    Decorator translating SQLAlchemy failures into DatabaseError.

    The session is rolled back so it stays usable, the failure is logged
    with the call arguments, and a DatabaseError carrying the original
    exception is raised in its place.

    :param repository_name: Name of the repository (e.g., "MatchRepository")
    :returns: Decorated coroutine function

    :example:
        @repository_error_handler("MatchRepository")
        async def exists(self, match_id: str, puuid: str) -> bool:
            ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        operation_name = func.__name__
        sig = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await func(*args, **kwargs)
            except SQLAlchemyError as e:
                bound_args = sig.bind(*args, **kwargs)
                context: Dict[str, Any] = {
                    name: str(value)[:200]
                    for name, value in bound_args.arguments.items()
                    if name != "self"
                }

                db = getattr(args[0], "db", None) if args else None
                if db is not None:
                    await db.rollback()

                logger.error(
                    "Database operation failed",
                    repository=repository_name,
                    operation=operation_name,
                    error_type=e.__class__.__name__,
                    error=str(e),
                    **context,
                )
                raise DatabaseError(
                    message=str(e),
                    service=repository_name,
                    operation=operation_name,
                    context=context,
                    original_error=e,
                ) from e

        return wrapper

    return decorator
