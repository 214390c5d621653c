"""
Todo Auth API - Security Validation

Startup checks for insecure configuration.
"""

import logging
import warnings

from todo_api.config import Settings, settings as default_settings

DEFAULT_JWT_SECRET = "dev-secret-key-change-in-production"

logger = logging.getLogger(__name__)


def validate_security_config(settings: Settings = default_settings) -> None:
    """
    Validate security configuration on startup.

    Issues warnings for insecure configurations but does not crash the application
    (to allow tests and development to run).
    """
    # JWT Secret Key validation
    if settings.JWT_SECRET_KEY == DEFAULT_JWT_SECRET:
        if settings.is_production:
            warnings.warn(
                "SECURITY WARNING: Using default JWT_SECRET_KEY in production. "
                "Set JWT_SECRET_KEY environment variable to a strong secret.",
                UserWarning,
            )
        else:
            logger.info("Using development JWT secret; set JWT_SECRET_KEY before deploying")

    # CORS validation
    if "*" in settings.CORS_ORIGINS:
        warnings.warn(
            "SECURITY WARNING: CORS wildcard (*) detected. "
            "Set specific origins via CORS_ORIGINS.",
            UserWarning,
        )

    # JWT Secret Key strength (basic check)
    if len(settings.JWT_SECRET_KEY) < 32 and settings.is_production:
        warnings.warn(
            "SECURITY WARNING: JWT_SECRET_KEY is too short for production. "
            "Use at least 32 characters.",
            UserWarning,
        )
