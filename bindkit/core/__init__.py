"""
Core binding registry.

This module provides the registry that maps events to actions, the borrowed
event forms it accepts, and the command classes that can be bound as actions.
"""

from .actions import Action, Command, ConstantCommand, MethodCommand
from .bindings import Bindings
from .events import EventView, to_owned

__all__ = [
    'Action',
    'Bindings',
    'Command',
    'ConstantCommand',
    'EventView',
    'MethodCommand',
    'to_owned'
]
