"""
Handler decorators for error handling, logging, and response formatting.
"""
import functools
import uuid
import traceback
from typing import Callable, Any, Dict
from logger_config import get_logger
from utils.exceptions import ProfileUpdateError

logger = get_logger(__name__)


def lambda_handler(
    func: Callable[[Any, Any], Dict[str, Any]]
) -> Callable[[Any, Any], Dict[str, Any]]:
    """
    Decorator for Lambda handler functions.

    Provides:
    - Request correlation IDs for logging
    - Logging of failures before they are re-raised to the runtime

    Exceptions are never converted into responses: the Lambda runtime
    must see them as invocation errors.

    Args:
        func: The handler function to decorate

    Returns:
        Decorated handler function
    """
    @functools.wraps(func)
    def wrapper(event: Any, context: Any) -> Dict[str, Any]:
        correlation_id = str(uuid.uuid4())

        logger.info(
            f"Handler {func.__name__} invoked",
            extra={
                "correlation_id": correlation_id,
                "handler": func.__name__,
                "request_id": getattr(context, "aws_request_id", None) if context else None
            }
        )

        try:
            result = func(event, context)
        except ProfileUpdateError as e:
            logger.error(
                f"Handler {func.__name__} failed: {e.message}",
                extra={
                    "correlation_id": correlation_id,
                    "cause": repr(e.__cause__) if e.__cause__ else None
                }
            )
            raise
        except Exception as e:
            logger.error(
                f"Handler {func.__name__} failed: {str(e)}",
                extra={
                    "correlation_id": correlation_id,
                    "traceback": traceback.format_exc()
                },
                exc_info=True
            )
            raise

        logger.info(
            f"Handler {func.__name__} completed",
            extra={"correlation_id": correlation_id}
        )

        return result

    return wrapper
