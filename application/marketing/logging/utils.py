"""
Logging utilities for the promotion engine
"""
import logging

from marketing.logging.config import LoggingConfig
from marketing.logging.handlers import get_app_handler, get_audit_handler, get_local_file_handler
from marketing.logging.filters import EvaluationContextFilter


def _attach(logger: logging.Logger, handler: logging.Handler) -> logging.Logger:
    logger.handlers.clear()
    if not any(isinstance(f, EvaluationContextFilter) for f in handler.filters):
        handler.addFilter(EvaluationContextFilter())
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


def get_app_logger(name: str = "marketing"):
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    # central handler or one local file per module
    handler = get_app_handler() if LoggingConfig.FIREHOSE_ENABLED else get_local_file_handler(name.replace('.', '_'))
    return _attach(logger, handler)


def init_audit_logger(stream_name: str | None = None):
    logger_name = f"marketing.audit.{stream_name.replace('-', '_')}" if stream_name else "marketing.audit"
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        return logger
    return _attach(logger, get_audit_handler())


def initialize_logging():
    is_valid, message = LoggingConfig.is_valid_config()
    if not is_valid:
        print(f"Warning: {message}")
    print("Logging system initialized (marketing)")
