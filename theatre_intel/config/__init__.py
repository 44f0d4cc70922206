"""
Configuration management for the Theatre Intel system.
"""

from .settings import Settings, get_settings
from .data_store import DataStoreConfig
from .thresholds import ThresholdConfig

__all__ = [
    "Settings",
    "get_settings",
    "DataStoreConfig",
    "ThresholdConfig",
]
