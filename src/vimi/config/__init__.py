"""
Configuration management package for vimi.

This package builds the effective configuration from built-in defaults and
environment overrides.
"""

from .loader import (
    ConfigLoader,
    ConfigLoadResult,
    ConfigurationError,
    load_config,
)

__all__ = [
    'ConfigLoader',
    'ConfigLoadResult',
    'ConfigurationError',
    'load_config',
]
