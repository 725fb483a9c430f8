"""
bindkit: bind events to actions and run them on demand.
"""

from .core import Action, Bindings, Command, ConstantCommand, EventView, MethodCommand, to_owned
from .input_system import ActionDispatcher, BindingContextManager, DispatchResult, KeyConfigLoader
from .log_manager import LogCategory, LogLevel, LogManager

__version__ = "0.3.0"

__all__ = [
    'Action',
    'ActionDispatcher',
    'BindingContextManager',
    'Bindings',
    'Command',
    'ConstantCommand',
    'DispatchResult',
    'EventView',
    'KeyConfigLoader',
    'LogCategory',
    'LogLevel',
    'LogManager',
    'MethodCommand',
    'to_owned'
]
