"""
Event payload carrier.

An event binds a name to a payload of any type. The bus never looks at the
payload; handlers that know what a given name carries read it back with
:meth:`Event.data_as`, which checks the type exactly.

Example:
    event = Event("TickEvent", 32)
    event.data_as(int)   # 32
    event.data_as(str)   # raises PayloadTypeError
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from eventbus.events.errors import PayloadTypeError

T = TypeVar("T")


@dataclass(frozen=True)
class Event:
    """
    Named event with an arbitrary payload.

    Attributes:
        name: Event name; handlers are looked up by exact string match
        data: Event payload; its concrete type is fixed at construction
    """

    name: str
    data: Any = None

    def __post_init__(self):
        # Accept anything with a string form as a name (enums, paths, ...)
        if not isinstance(self.name, str):
            object.__setattr__(self, "name", str(self.name))

    @property
    def payload_type(self) -> type:
        """Concrete type of the payload."""
        return type(self.data)

    def data_as(self, expected: type[T]) -> T:
        """
        Return the payload as ``expected``.

        Args:
            expected: The exact type the payload was created with

        Returns:
            The payload object itself

        Raises:
            PayloadTypeError: If the payload is not exactly of type ``expected``
        """
        if type(self.data) is not expected:
            raise PayloadTypeError(self.name, expected, type(self.data))
        return self.data
