"""
FqStats v0.1.0

Configuration management for FqStats.

Author: FqStats Development Team
License: MIT License - See LICENSE
"""

from .schema import (
    DEFAULT_CONFIG,
    OUTPUT_FORMATS,
    LOG_LEVELS,
    load_config,
    save_config_template,
    validate_config,
    resolve_log_level,
)

__all__ = [
    "DEFAULT_CONFIG",
    "OUTPUT_FORMATS",
    "LOG_LEVELS",
    "load_config",
    "save_config_template",
    "validate_config",
    "resolve_log_level",
]
