from __future__ import annotations

"""Public configuration API for AnnotationFilter."""

from AnnotationFilter.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from AnnotationFilter.config.filter import FilterConfig, parse_filter_query
from AnnotationFilter.config.input import InputConfig
from AnnotationFilter.config.output import OutputConfig
from AnnotationFilter.config.log import LogConfig

__all__ = [
    "LogConfig",
    "InputConfig",
    "FilterConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
    "parse_filter_query",
]
