"""
Event dispatch with logging.

The dispatcher sits between an input source and a registry. Unlike the
registry it owns a failure policy: errors raised by actions are logged and
reported in the result instead of reaching the input loop.
"""
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Protocol

from ..core import Action
from ..log_manager import LogManager


class ActionResolver(Protocol):
    """Anything that can resolve an event to an action."""

    def get_action(self, event: Any) -> Optional[Action]:
        ...


@dataclass
class DispatchResult:
    """Outcome of dispatching a single event."""
    event: Any
    handled: bool
    value: Any = None
    error: Optional[Exception] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class ActionDispatcher:
    """Dispatches events to the actions bound to them."""

    def __init__(self, resolver: ActionResolver, log_manager: Optional[LogManager] = None):
        self.resolver = resolver
        self.log_manager = log_manager

    def dispatch(self, event: Any) -> DispatchResult:
        """
        Run the action bound to an event.

        Args:
            event: The event to dispatch

        Returns:
            DispatchResult: Whether the event was handled, with the action's
            result or the error it raised
        """
        if self.log_manager:
            self.log_manager.input(f"Event received: {event!r}")

        action = self.resolver.get_action(event)
        if action is None:
            if self.log_manager:
                self.log_manager.debug(f"No action bound to {event!r}")
            return DispatchResult(event=event, handled=False)

        try:
            value = action()
        except Exception as e:
            # Log error but don't crash the input loop
            if self.log_manager:
                self.log_manager.error(f"Error executing action for {event!r}: {e}")
            return DispatchResult(event=event, handled=False, error=e)

        if self.log_manager:
            self.log_manager.dispatch(f"{event!r} -> {value!r}")
        return DispatchResult(event=event, handled=True, value=value)

    def dispatch_all(self, events: Iterable[Any]) -> list[DispatchResult]:
        """Dispatch several events in order."""
        return [self.dispatch(event) for event in events]

    def is_action_registered(self, event: Any) -> bool:
        """Check whether an event resolves to an action."""
        return self.resolver.get_action(event) is not None
