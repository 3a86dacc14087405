"""
Pydantic schemas for the reading list API.
"""

from .articles import (
    ArticleCreate,
    Article,
    ToggleReadRequest,
    MutationResult,
)
from .health import HealthStatus

__all__ = [
    "ArticleCreate",
    "Article",
    "ToggleReadRequest",
    "MutationResult",
    "HealthStatus",
]
