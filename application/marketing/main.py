"""
Process-level setup for hosts embedding the promotion engine.

The package has no server of its own. Call ``setup()`` once at startup, before
the first evaluation, so Sentry reporting and the log pipeline are live;
without it ``capture_exception`` stays a no-op.
"""
from marketing.config.sentry import init_sentry
from marketing.logging.utils import initialize_logging, get_app_logger


def setup():
    # Initialize Sentry (must be done before the first evaluation)
    init_sentry()

    # Initialize structured logging
    initialize_logging()
    logger = get_app_logger('marketing.main')
    logger.info("Promotion engine setup complete")
    return logger
