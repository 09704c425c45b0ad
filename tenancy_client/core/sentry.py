from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from tenancy_client import config


def get_sentry_kwargs():
    """Sentry init kwargs, built on call so the aiohttp integration hooks in at init time."""
    return {
        "dsn": config.SENTRY_DSN,
        "integrations": [AioHttpIntegration()],
        "environment": config.ENVIRONMENT or "unknown",
        "traces_sample_rate": config.SENTRY_SAMPLE_RATE or 1.0,
    }
