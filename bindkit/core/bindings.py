"""
Binding registry for event-driven command dispatch.

This module maps events (key codes, command names, byte strings) to actions:
zero-argument callables that produce a result. Actions can be looked up,
executed, and rebound at runtime without touching the code that dispatches
events.
"""
from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any, Generic, Optional, TypeVar, Union

from .actions import Action
from .events import to_owned

E = TypeVar("E", bound=Hashable)
R = TypeVar("R")

BindingPairs = Union[Iterable[tuple[Any, Action[R]]], Mapping[Any, Action[R]]]


class Bindings(Generic[E, R]):
    """Registry mapping events to the actions they trigger.

    Events are stored in owned form. Lookups accept any key that hashes and
    compares equal to a stored event, so a borrowed form finds the same
    binding as the owned one. Actions are kept by reference and are only
    ever called by ``run_action``.
    """

    def __init__(self):
        self._actions: dict[E, Action[R]] = {}

    @classmethod
    def from_pairs(cls, pairs: BindingPairs) -> "Bindings[E, R]":
        """
        Build a registry from an initial sequence of bindings.

        Args:
            pairs: (event, action) pairs, or a mapping of events to actions.
                Later duplicates overwrite earlier ones.

        Returns:
            Bindings: The populated registry
        """
        bindings: Bindings[E, R] = cls()
        bindings.bind_actions(pairs)
        return bindings

    def get_action(self, event: Any) -> Optional[Action[R]]:
        """
        Get the action bound to an event without running it.

        Args:
            event: The event, in owned or borrowed form

        Returns:
            Action: The bound action, or None if the event is unbound
        """
        return self._actions.get(event)

    def run_action(self, event: Any) -> Optional[R]:
        """
        Run the action bound to an event and return its result.

        Exceptions raised by the action reach the caller unchanged.

        Args:
            event: The event, in owned or borrowed form

        Returns:
            The action's result, or None if the event is unbound
        """
        action = self.get_action(event)
        if action is None:
            return None
        return action()

    def bind_action(self, event: Any, action: Action[R]) -> None:
        """
        Create or overwrite the binding for an event.

        The previous action, if any, is dropped without being called.
        ``get_action()`` is useful for moving an action to another event.

        Args:
            event: The event, in owned or borrowed form
            action: The action to bind
        """
        self._actions[to_owned(event)] = action

    def bind_actions(self, pairs: BindingPairs) -> None:
        """
        Bind several actions in order.

        Args:
            pairs: (event, action) pairs, or a mapping of events to actions
        """
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for event, action in items:
            self.bind_action(event, action)

    def is_bound(self, event: Any) -> bool:
        """Check whether an event currently has an action."""
        return event in self._actions

    def events(self) -> list[E]:
        """Get the owned events that currently have bindings."""
        return list(self._actions)

    def items(self) -> list[tuple[E, Action[R]]]:
        """Get the current bindings as (event, action) pairs."""
        return list(self._actions.items())

    def get_debug_info(self) -> dict[str, Any]:
        """
        Get debug information about the registry.

        Returns:
            Dict: Binding count and bound events
        """
        return {
            "total_bindings": len(self._actions),
            "events": [repr(event) for event in self._actions],
        }

    def __contains__(self, event: Any) -> bool:
        return self.is_bound(event)

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[E]:
        return iter(self._actions)

    def __repr__(self) -> str:
        events = ", ".join(repr(event) for event in self._actions)
        return f"{type(self).__name__}({events})"
