"""
Event key forms.

Events are stored in owned form. Callers may hand the registry a borrowed
form instead (a window over a string, a memoryview over bytes) as long as it
hashes and compares equal to the owned value. Conversion happens only when a
binding is inserted.
"""
from typing import Any, Optional


class EventView:
    """A window over a string that behaves like the string for lookups.

    The view keeps a reference to the underlying buffer and never copies it
    until ``to_owned()`` is called.
    """

    __slots__ = ("_buffer", "_start", "_end")

    def __init__(self, buffer: str, start: int = 0, end: Optional[int] = None):
        length = len(buffer)
        if end is None:
            end = length
        if not 0 <= start <= end <= length:
            raise ValueError(f"Invalid view bounds {start}:{end} for buffer of length {length}")
        self._buffer = buffer
        self._start = start
        self._end = end

    def to_owned(self) -> str:
        """Copy the viewed characters into an owned string."""
        return self._buffer[self._start:self._end]

    def __str__(self) -> str:
        return self.to_owned()

    def __len__(self) -> int:
        return self._end - self._start

    def __hash__(self) -> int:
        # Must agree with hash(str) so dict lookups find owned keys
        return hash(self.to_owned())

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, EventView):
            return self.to_owned() == other.to_owned()
        if isinstance(other, str):
            return self.to_owned() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"EventView({self.to_owned()!r})"


def to_owned(event: Any) -> Any:
    """
    Convert an event to the form stored inside a registry.

    Args:
        event: An owned event or a borrowed form of one

    Returns:
        The owned event
    """
    if isinstance(event, memoryview):
        return event.tobytes()
    to_owned_method = getattr(event, "to_owned", None)
    if callable(to_owned_method):
        return to_owned_method()
    return event
