"""
Configuration module for tabtimetrack.
"""
from .settings import (
    TabTimeTrackConfig,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'TabTimeTrackConfig',
    'get_config',
    'load_config',
    'reload_config'
]
