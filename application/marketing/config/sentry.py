"""Sentry wiring; hosts enable it through marketing.main.setup()"""
import logging

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

# Logger
from marketing.logging.utils import get_app_logger
logger = get_app_logger("marketing.sentry")

# Settings
from marketing.config.settings import MarketingConfigs
configs = MarketingConfigs()


def init_sentry():
    """Initialize Sentry SDK when SENTRY_ENABLED is set"""
    if not configs.SENTRY_ENABLED:
        logger.info("Sentry monitoring is disabled")
        return

    if not configs.SENTRY_DSN:
        logger.warning("SENTRY_ENABLED is true but SENTRY_DSN is not configured")
        return

    sentry_sdk.init(
        dsn=configs.SENTRY_DSN,
        environment=configs.ENVIRONMENT,
        release=configs.SENTRY_RELEASE,
        traces_sample_rate=float(configs.SENTRY_TRACES_SAMPLE_RATE),
        integrations=[
            LoggingIntegration(
                level=logging.INFO,        # breadcrumbs
                event_level=logging.ERROR  # events
            ),
        ],
        send_default_pii=False,
        attach_stacktrace=True,
        max_breadcrumbs=50,
        before_send=before_send_filter,
    )

    logger.info(f"Sentry initialized successfully for environment: {configs.ENVIRONMENT}")


def before_send_filter(event, hint):
    """Strip customer identifiers from the evaluation context before sending"""
    extra = event.get('extra') or {}
    for key in list(extra.keys()):
        if 'customer' in key.lower():
            extra[key] = '[Filtered]'
    return event


def capture_exception(exception, **kwargs):
    """Report to Sentry when enabled"""
    if configs.SENTRY_ENABLED:
        sentry_sdk.capture_exception(exception, **kwargs)

