"""
Command pattern implementation for bound actions.

An action is any zero-argument callable. This module defines the action type
and a small set of command classes whose instances are themselves actions,
so they can be bound to events directly.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

R = TypeVar("R")

Action = Callable[[], R]


class Command(ABC, Generic[R]):
    """Abstract base class for commands that can be bound as actions."""

    @abstractmethod
    def execute(self) -> R:
        """
        Execute the command.

        Returns:
            The command's result
        """
        pass

    def __call__(self) -> R:
        return self.execute()


class MethodCommand(Command[Any]):
    """Command that delegates to a method on a target object."""

    def __init__(self, target: Any, method_name: str, **kwargs: Any):
        self.target = target
        self.method_name = method_name
        self.kwargs = kwargs

    def execute(self) -> Any:
        """Call the target method with the stored keyword arguments."""
        method = getattr(self.target, self.method_name)
        return method(**self.kwargs)

    def __repr__(self) -> str:
        return f"MethodCommand({type(self.target).__name__}.{self.method_name})"


class ConstantCommand(Command[R]):
    """Command that always returns the same value."""

    def __init__(self, value: R):
        self.value = value

    def execute(self) -> R:
        return self.value

    def __repr__(self) -> str:
        return f"ConstantCommand({self.value!r})"
