"""Core enums.

Usage:
    from src.core.enums import ErrorCode
"""

from src.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode"]
