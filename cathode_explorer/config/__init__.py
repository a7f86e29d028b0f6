"""
Config package for cathode_explorer.

Responsible for:
- the config model (ExplorerConfig)
- loading explorer.json (load_explorer_config)
"""

from .model import ExplorerConfig
from .loader import load_explorer_config

__all__ = ["ExplorerConfig", "load_explorer_config"]
