"""
Logging configuration for the profile update Lambda.

Loggers write to stdout (which Lambda forwards to CloudWatch Logs) and
append any ``extra={...}`` context to the message as ``key=value`` pairs.
"""
import logging
import os
import sys

# Attributes every LogRecord carries; anything else came in through `extra`.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord('', 0, '', 0, '', (), None).__dict__
) | {'message', 'asctime'}


class ContextFormatter(logging.Formatter):
    """Formatter that renders `extra` fields after the message."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {
            key: value for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith('_')
        }
        if not context:
            return line
        pairs = ' '.join(f'{key}={context[key]!r}' for key in sorted(context))
        return f'{line} | {pairs}'


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a configured logger instance for AWS Lambda.

    Args:
        name: Logger name (defaults to this module's name)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or __name__)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logger.level)
    handler.setFormatter(ContextFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(handler)

    # Prevent duplicate lines through the root logger
    logger.propagate = False

    return logger
