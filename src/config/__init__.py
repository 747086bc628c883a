"""
Configuration module for the date window validators.
"""
from .settings import (
    ValidationConfig,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'ValidationConfig',
    'get_config',
    'load_config',
    'reload_config'
]
