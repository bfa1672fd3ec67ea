"""
Centralized error handling utilities for SexSec.

The helpers here only log. Exceptions keep propagating unless a caller
explicitly passes ``reraise=False``.
"""

import functools
from contextlib import contextmanager
from typing import Any, Callable, Optional, Tuple, Type, Union

from utils.logging_config import get_logger

logger = get_logger(__name__)  # pylint: disable=invalid-name

ErrorTypes = Optional[Union[Type[Exception], Tuple[Type[Exception], ...]]]


def _matches(error: Exception, error_types: ErrorTypes) -> bool:
    return error_types is None or isinstance(error, error_types)


def handle_errors(
        error_types: ErrorTypes = None,
        default_return: Any = None,
        log_error: bool = True,
        reraise: bool = True
) -> Callable:
    """
    Decorator that logs matching exceptions with their traceback.

    Args:
        error_types: Exception types to handle (default: all exceptions);
            anything else propagates untouched and unlogged
        default_return: Value returned instead when ``reraise`` is False
        log_error: Whether to log the error
        reraise: Whether to re-raise the exception after logging

    Returns:
        Decorated function
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                if not _matches(e, error_types):
                    raise
                if log_error:
                    logger.error("Error in %s: %s", func.__name__, e, exc_info=True)
                if reraise:
                    raise
                return default_return
        return wrapper
    return decorator


def handle_async_errors(
        error_types: ErrorTypes = None,
        default_return: Any = None,
        log_error: bool = True,
        reraise: bool = True
) -> Callable:
    """Coroutine counterpart of handle_errors, with the same arguments."""
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                if not _matches(e, error_types):
                    raise
                if log_error:
                    logger.error("Error in async %s: %s", func.__name__, e, exc_info=True)
                if reraise:
                    raise
                return default_return
        return wrapper
    return decorator


@contextmanager
def error_context(
        operation: str,
        error_types: ErrorTypes = None,
        log_error: bool = True,
        reraise: bool = True
):
    """
    Log failures of the wrapped block as "Error during <operation>".

    With ``reraise=False`` a matching exception is swallowed after logging
    and execution continues after the ``with`` statement.
    """
    try:
        yield
    except Exception as e:
        if not _matches(e, error_types):
            raise
        if log_error:
            logger.error("Error during %s: %s", operation, e, exc_info=True)
        if reraise:
            raise
