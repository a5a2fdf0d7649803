"""Service layer for AnnotationFilter.

Provides the application service that applies queries to annotations and a
factory building it from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from AnnotationFilter.services.filter import AnnotationFilterService

if TYPE_CHECKING:
    from AnnotationFilter.config import AppConfig


def create_filter_service(config: AppConfig) -> AnnotationFilterService:
    """Create a filter service from configuration.

    Args:
        config: Application configuration containing filter settings.

    Returns:
        Configured AnnotationFilterService instance.
    """
    return AnnotationFilterService(unknown_fields=config.filter.unknown_fields)


__all__ = [
    "AnnotationFilterService",
    "create_filter_service",
]
