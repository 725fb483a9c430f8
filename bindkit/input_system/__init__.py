"""
Input system module for dispatching events to bound actions.

This module provides layered binding contexts, YAML key configuration,
and a dispatcher that logs what it runs.
"""

from .context_manager import BindingContextManager
from .dispatcher import ActionDispatcher, DispatchResult
from .key_config_loader import GLOBAL_CONTEXT, KeyConfigLoader

__all__ = [
    'ActionDispatcher',
    'BindingContextManager',
    'DispatchResult',
    'GLOBAL_CONTEXT',
    'KeyConfigLoader'
]
