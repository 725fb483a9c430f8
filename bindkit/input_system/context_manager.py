"""
Binding context management.

This module layers several registries: one per named context plus a global
one. Contexts are pushed onto a stack, and lookups search the stack from the
top before falling back to the global bindings.
"""
from typing import Any, Optional

from ..core import Action, Bindings


class BindingContextManager:
    """Manages a stack of binding contexts over a global registry."""

    def __init__(self, global_bindings: Optional[Bindings] = None):
        self.global_bindings: Bindings = global_bindings if global_bindings is not None else Bindings()
        self._context_bindings: dict[str, Bindings] = {}
        self._context_stack: list[str] = []

    def bindings_for(self, context: str) -> Bindings:
        """
        Get the registry for a context, creating it if needed.

        Args:
            context: The context name

        Returns:
            Bindings: The context's registry
        """
        if context not in self._context_bindings:
            self._context_bindings[context] = Bindings()
        return self._context_bindings[context]

    def set_context_bindings(self, context: str, bindings: Bindings) -> None:
        """Replace the registry used for a context."""
        self._context_bindings[context] = bindings

    def get_contexts(self) -> list[str]:
        """Get the names of all contexts that have a registry."""
        return sorted(self._context_bindings)

    def push_context(self, context: str) -> None:
        """
        Push a context onto the stack.

        Args:
            context: The context to push
        """
        self._context_stack.append(context)

    def pop_context(self) -> Optional[str]:
        """
        Pop the top context from the stack.

        Returns:
            str: The popped context, or None if the stack is empty
        """
        if self._context_stack:
            return self._context_stack.pop()
        return None

    def peek_context(self) -> Optional[str]:
        """Get the top context without removing it."""
        return self._context_stack[-1] if self._context_stack else None

    def clear_context_stack(self) -> None:
        """Remove every context from the stack."""
        self._context_stack.clear()

    def is_in_context(self, context: str) -> bool:
        """Check if the specified context is on the stack."""
        return context in self._context_stack

    def get_action(self, event: Any) -> Optional[Action]:
        """
        Resolve the action for an event.

        Active contexts are searched from the top of the stack, then the
        global bindings.

        Args:
            event: The event, in owned or borrowed form

        Returns:
            Action: The resolved action, or None if no layer binds the event
        """
        for context in reversed(self._context_stack):
            bindings = self._context_bindings.get(context)
            if bindings is None:
                continue
            action = bindings.get_action(event)
            if action is not None:
                return action

        return self.global_bindings.get_action(event)

    def run_action(self, event: Any) -> Any:
        """
        Run the resolved action for an event and return its result.

        Returns:
            The action's result, or None if no layer binds the event
        """
        action = self.get_action(event)
        if action is None:
            return None
        return action()

    def bind_action(self, event: Any, action: Action, context: Optional[str] = None) -> None:
        """
        Bind an action in a context, or globally when no context is given.

        Args:
            event: The event, in owned or borrowed form
            action: The action to bind
            context: Optional context to bind in
        """
        if context is None:
            self.global_bindings.bind_action(event, action)
        else:
            self.bindings_for(context).bind_action(event, action)
