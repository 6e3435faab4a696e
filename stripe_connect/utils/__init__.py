"""
Utility modules for the Connect client
"""
from .config_loader import ConnectConfig, StoreConfig, load_connect_config

__all__ = [
    'ConnectConfig',
    'StoreConfig',
    'load_connect_config',
]
