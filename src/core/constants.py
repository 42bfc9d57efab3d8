"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Example:
    >>> from src.core.constants import SYSTEM_ACTOR
    >>> created_by = current_user.username or SYSTEM_ACTOR
"""

# =============================================================================
# Identity
# =============================================================================

SYSTEM_ACTOR: str = "System"
"""Actor recorded in audit columns when no authenticated user is present."""


# =============================================================================
# Request Pipeline
# =============================================================================

SLOW_REQUEST_THRESHOLD_MS: int = 500
"""Default elapsed time above which a request is logged as long running."""


# =============================================================================
# Entity Field Limits
# =============================================================================

PRODUCT_NAME_MAX_LENGTH: int = 200
PRODUCT_DESCRIPTION_MAX_LENGTH: int = 2000
PRODUCT_SKU_MAX_LENGTH: int = 50
PRODUCT_SKU_PATTERN: str = r"[A-Z0-9\-]+"
PRODUCT_PRICE_LIMIT: int = 1_000_000
CATEGORY_NAME_MAX_LENGTH: int = 100
CATEGORY_DESCRIPTION_MAX_LENGTH: int = 500
